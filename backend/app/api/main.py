from fastapi import FastAPI

from app.api.routes.health import router as health_router
from app.api.routes.currency import router as currency_router


app = FastAPI(
    title="Crypto Recommendation",
    description="Crypto recommendation API",
    version="0.1.0",
    contact={
        "name": "Crypto Recommendation",
        "url": "https://cryptorecommendation.io",
        "email": "inbox@cryptorecommendation.io",
    },
    servers=[{"url": "http://localhost:8080"}],
)

app.include_router(health_router)
app.include_router(currency_router)

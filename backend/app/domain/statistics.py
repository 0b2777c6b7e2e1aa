from __future__ import annotations

from dataclasses import dataclass

from app.domain.observation import Observation


@dataclass(frozen=True, slots=True)
class SymbolStatistics:
    """
    Extrêmes d'un symbole (éventuellement sur un seul jour UTC).
    Chaque champ est indépendant: None = pas de données, pas une erreur.
    """
    minimum: Observation | None = None
    maximum: Observation | None = None
    oldest: Observation | None = None
    newest: Observation | None = None

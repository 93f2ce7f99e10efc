"""
Konfiguracja sumstr — zmienne środowiskowe, opcjonalnie z pliku .env.

Zmienne:
  SUMSTR_EXTENSION      rozszerzenie plików wejściowych w trybie katalogu (domyślnie .py)
  SUMSTR_OUT_EXTENSION  rozszerzenie dopisywane do nazw plików wynikowych (domyślnie brak)
  SUMSTR_GRANULARITY    domyślny poziom szczegółowości 1..3 (domyślnie 3)
  SUMSTR_WIDTH          domyślna szerokość linii (puste → automatycznie)
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

# Zmienne już ustawione w środowisku mają pierwszeństwo przed .env
load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True, slots=True)
class Settings:
    extension: str
    out_extension: str
    granularity: int
    width: int | None


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} musi być liczbą całkowitą, otrzymano: {raw!r}") from None


def get_settings() -> Settings:
    return Settings(
        extension     = os.getenv("SUMSTR_EXTENSION",     ".py"),
        out_extension = os.getenv("SUMSTR_OUT_EXTENSION", ""),
        granularity   = _int_env("SUMSTR_GRANULARITY", 3),
        width         = _int_env("SUMSTR_WIDTH", None),
    )

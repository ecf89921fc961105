# utils/metadata_loader.py — load & serve the province catalog for the app
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

import pandas as pd
import streamlit as st

logger = logging.getLogger(__name__)

META_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "metadata")
PROVINCES_PATH = os.path.join(META_DIR, "provinces.csv")

REQUIRED_COLUMNS = ("name_th", "name_en", "single_constituency")
_TRUTHY = {"true", "1", "yes", "y"}


@dataclass(frozen=True)
class Province:
    name: str
    name_en: str = ""
    single_constituency: bool = False

    def __str__(self) -> str:
        return self.name


class ProvinceCatalog:
    """
    Read-only, ordered collection of provinces.
    Built once per process (see get_catalog); there is no mutation API.
    """

    __slots__ = ("_provinces", "_by_name")

    def __init__(self, provinces: Iterable[Province]):
        self._provinces: Tuple[Province, ...] = tuple(provinces)
        self._by_name: Dict[str, Province] = {p.name: p for p in self._provinces}

    def __iter__(self) -> Iterator[Province]:
        return iter(self._provinces)

    def __len__(self) -> int:
        return len(self._provinces)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def provinces(self) -> Tuple[Province, ...]:
        return self._provinces

    def names(self) -> list[str]:
        return [p.name for p in self._provinces]

    def get(self, name: Optional[str]) -> Optional[Province]:
        if name is None:
            return None
        return self._by_name.get(name)

    def is_single_constituency(self, name: Optional[str]) -> bool:
        p = self.get(name)
        return bool(p and p.single_constituency)

    def excluding(self, *names: Optional[str]) -> list[Province]:
        """Catalog order, minus the given names (None entries are ignored)."""
        drop = {n for n in names if n}
        return [p for p in self._provinces if p.name not in drop]


# ─────────────────────────────────────────────────────────────────────────────
# Loaders (cached). The CSV is read once; the catalog is a process singleton.
# ─────────────────────────────────────────────────────────────────────────────

@st.cache_data(show_spinner=False)
def load_provinces(path: str = PROVINCES_PATH) -> pd.DataFrame:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Missing province catalog `{path}`.")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
    except Exception as e:
        raise RuntimeError(f"Failed to read province catalog at `{path}`: {e}") from e

    df.columns = df.columns.str.strip().str.lower()
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Province catalog must have columns {', '.join(REQUIRED_COLUMNS)} (missing: {', '.join(missing)}).")

    df["name_th"] = df["name_th"].astype(str).str.strip()
    df["name_en"] = df["name_en"].astype(str).str.strip()
    df["single_constituency"] = df["single_constituency"].astype(str).str.strip().str.lower().isin(_TRUTHY)

    df = df[df["name_th"] != ""].drop_duplicates(subset=["name_th"], keep="first").reset_index(drop=True)
    if df.empty:
        raise ValueError(f"Province catalog `{path}` has no provinces.")
    return df[list(REQUIRED_COLUMNS)]


def build_catalog(df: pd.DataFrame) -> ProvinceCatalog:
    return ProvinceCatalog(
        Province(name=r.name_th, name_en=r.name_en, single_constituency=bool(r.single_constituency))
        for r in df.itertuples(index=False)
    )


@st.cache_resource(show_spinner=False)
def get_catalog(path: str = PROVINCES_PATH) -> ProvinceCatalog:
    catalog = build_catalog(load_provinces(path))
    single = [p.name_en or p.name for p in catalog if p.single_constituency]
    logger.info("Loaded %d provinces from %s (%d single-constituency: %s)",
                len(catalog), path, len(single), ", ".join(single) or "none")
    return catalog

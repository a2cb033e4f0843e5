"""
Loader konfiguracji z automatycznym uzupełnianiem wartości domyślnych.

Konfiguracja jest trzymana w plikach YAML:
- defaults.yaml: domyślne parametry FOV, znaki renderowania, gęstość
  losowych ścian
- scenarios.yaml: definicje map testowych

Logika merge (uzupełniania defaults):
    1. Wczytaj defaults.yaml - sekcja fov_defaults
    2. Wczytaj konkretny scenariusz
    3. Klucze, których brak w scenariuszu, biorą wartość z defaults
    4. Scenariusz może nadpisać defaults

Przykład:
    defaults.yaml:
        fov_defaults:
            range: 8
            corner_extension: false

    scenarios.yaml:
        scenarios:
            pillars:
                range: 5          # nadpisuje default
                # corner_extension nie podane -> false z defaults

Użycie:
    >>> loader = ConfigLoader("data/")
    >>> scenario = loader.load_scenario("pillars")
    >>> scenario.range
    5
"""

from __future__ import annotations
import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .scenario import Scenario

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Ładuje konfigurację z plików YAML z automatycznym merge defaults.

    Attributes:
        data_path (Path): Ścieżka do folderu data/
        _defaults (Dict): Cache wczytanych defaults
        _scenarios (Dict): Cache surowych definicji scenariuszy
    """

    def __init__(self, data_path: str = "data/"):
        """
        Inicjalizuje loader z ścieżką do danych.

        Args:
            data_path: Ścieżka do folderu z plikami YAML
        """
        self.data_path = Path(data_path)
        self._defaults: Optional[Dict] = None
        self._scenarios: Optional[Dict] = None

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE PLIKÓW
    # ─────────────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> Dict:
        """
        Wczytuje plik YAML.

        Raises:
            FileNotFoundError: Jeśli plik nie istnieje
        """
        filepath = self.data_path / filename
        logger.debug("Loading %s", filepath)
        with open(filepath, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def get_defaults(self) -> Dict:
        """
        Zwraca słownik z wartościami domyślnymi.

        Cache'uje wczytany plik - kolejne wywołania są szybkie.
        """
        if self._defaults is None:
            self._defaults = self._load_yaml("defaults.yaml")
        return self._defaults

    def get_fov_defaults(self) -> Dict:
        """Sekcja fov_defaults (range, corner_extension)."""
        return self.get_defaults().get("fov_defaults", {})

    def get_render_config(self) -> Dict:
        """Znaki legendy dla FovMemory.render."""
        return self.get_defaults().get("render", {})

    def get_scatter_config(self) -> Dict:
        """Parametry losowych scenariuszy (density)."""
        return self.get_defaults().get("scatter", {})

    # ─────────────────────────────────────────────────────────────────────────
    # ŁADOWANIE SCENARIUSZY
    # ─────────────────────────────────────────────────────────────────────────

    def _get_all_scenarios_raw(self) -> Dict:
        """Zwraca wszystkie surowe definicje scenariuszy."""
        if self._scenarios is None:
            data = self._load_yaml("scenarios.yaml")
            self._scenarios = data.get("scenarios", {})
        return self._scenarios

    def load_scenario_config(self, scenario_id: str) -> Dict:
        """
        Wczytuje definicję scenariusza z uzupełnionymi defaults.

        Args:
            scenario_id: ID scenariusza (klucz w scenarios.yaml)

        Returns:
            Dict: Pełna definicja scenariusza

        Raises:
            KeyError: Jeśli scenariusz nie istnieje
        """
        scenarios = self._get_all_scenarios_raw()

        if scenario_id not in scenarios:
            raise KeyError(f"Scenario '{scenario_id}' not found in scenarios.yaml")

        result = self._deep_merge(self.get_fov_defaults(), scenarios[scenario_id] or {})
        result["id"] = scenario_id
        return result

    def load_scenario(self, scenario_id: str) -> Scenario:
        """
        Wczytuje scenariusz jako obiekt Scenario.

        Raises:
            KeyError: Jeśli scenariusz nie istnieje
            ValueError: Jeśli definicja jest niepoprawna
        """
        return Scenario.from_config(self.load_scenario_config(scenario_id))

    def load_all_scenarios(self) -> Dict[str, Scenario]:
        """Mapa scenario_id -> Scenario."""
        return {sid: self.load_scenario(sid) for sid in self.get_scenario_ids()}

    def get_scenario_ids(self) -> List[str]:
        """Lista ID wszystkich scenariuszy."""
        return list(self._get_all_scenarios_raw().keys())

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Głęboko łączy dwa słowniki.

        Override nadpisuje wartości w base.
        Nested dicts są merge'owane rekurencyjnie.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    def reload(self) -> None:
        """Czyści cache i wymusza ponowne wczytanie plików."""
        self._defaults = None
        self._scenarios = None

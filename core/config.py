# core/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = BASE_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "calculator.yaml"


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config (must be a mapping): {path}")
    return data


@dataclass(frozen=True)
class CalculatorConfig:
    currency: str = "LKR"
    defaults: Dict[str, Any] = field(default_factory=dict)
    loan_term_options: List[int] = field(default_factory=lambda: [3, 5, 7, 10])
    output_dir: str = "outputs"

    def default(self, key: str, fallback: Any = None) -> Any:
        return self.defaults.get(key, fallback)


def _from_dict(data: Dict[str, Any]) -> CalculatorConfig:
    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ValueError("'defaults' must be a mapping")

    terms = data.get("loan_term_options") or [3, 5, 7, 10]
    try:
        terms = [int(t) for t in terms]
    except (TypeError, ValueError) as e:
        raise ValueError(f"'loan_term_options' must be a list of integers. Value={terms!r}") from e

    return CalculatorConfig(
        currency=str(data.get("currency") or "LKR"),
        defaults=dict(defaults),
        loan_term_options=terms,
        output_dir=str(data.get("output_dir") or "outputs"),
    )


def load_config(path: Optional[Path] = None) -> CalculatorConfig:
    return _from_dict(_read_yaml(Path(path) if path else CONFIG_FILE))


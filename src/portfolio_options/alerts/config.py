"""
Alert Threshold Configuration

Loads and validates alert thresholds from YAML with environment overrides.

Config location: config/alert_thresholds.yaml

Schema:
- alert_thresholds:
    dte_danger: DTE at or below which DTE/ITM alerts are danger
    dte_warning: DTE at or below which DTE/ITM alerts fire at all
    dte_info: 30-day info threshold (not consulted by any check)
    pl_danger_loss: P/L% at or below which a loss is danger
    pl_warning_loss: P/L% at or below which a loss is warning
    pl_info_gain: P/L% at or above which a gain is info
    theta_warning: Daily theta decay in USD that triggers a warning

Environment variables (override the file):
    OPTION_ALERTS_DTE_DANGER=5
    OPTION_ALERTS_PL_INFO_GAIN=75
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

ENV_PREFIX = "OPTION_ALERTS_"


def _whole_days(value: Any) -> int:
    """Cast a day threshold, rejecting fractions such as 7.9."""
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"day thresholds must be whole numbers: {value!r}")
    return int(number)


@dataclass(frozen=True)
class AlertThresholds:
    """
    Alert rule thresholds.

    Immutable; build a new instance (or use dataclasses.replace) to override.
    dte_info is kept for parity with stored configurations but no check reads
    it: DTE above dte_warning never produces an alert.
    """

    dte_danger: int = 7
    dte_warning: int = 14
    dte_info: int = 30

    pl_danger_loss: float = -50.0
    pl_warning_loss: float = -25.0
    pl_info_gain: float = 50.0

    theta_warning: float = 10.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlertThresholds":
        """
        Create thresholds from a mapping, ignoring unknown keys.

        Missing keys keep their defaults.

        Raises:
            ValueError: If a value is not numeric or a day threshold is fractional
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown alert threshold keys: {', '.join(unknown)}")

        values = {}
        for name in known:
            if name in data and data[name] is not None:
                caster = _whole_days if name.startswith("dte_") else float
                values[name] = caster(data[name])
        return cls(**values)

    def validate(self) -> List[str]:
        """
        Validate threshold ordering.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.dte_danger < 0:
            errors.append(f"dte_danger must be >= 0: {self.dte_danger}")
        if self.dte_warning < self.dte_danger:
            errors.append(
                f"dte_warning ({self.dte_warning}) must be >= dte_danger ({self.dte_danger})"
            )
        if self.dte_info < self.dte_warning:
            errors.append(
                f"dte_info ({self.dte_info}) must be >= dte_warning ({self.dte_warning})"
            )

        if self.pl_danger_loss > self.pl_warning_loss:
            errors.append(
                f"pl_danger_loss ({self.pl_danger_loss}) must be <= "
                f"pl_warning_loss ({self.pl_warning_loss})"
            )
        if self.pl_warning_loss >= 0:
            errors.append(f"pl_warning_loss must be negative: {self.pl_warning_loss}")
        if self.pl_info_gain <= 0:
            errors.append(f"pl_info_gain must be positive: {self.pl_info_gain}")

        if self.theta_warning < 0:
            errors.append(f"theta_warning must be >= 0: {self.theta_warning}")

        return errors


DEFAULT_THRESHOLDS = AlertThresholds()


def merge_thresholds_with_env(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge threshold settings with environment variables.

    OPTION_ALERTS_<FIELD> overrides the file value for <field>.

    Args:
        config_data: Threshold mapping from the config file

    Returns:
        New mapping with env vars applied
    """
    merged = dict(config_data)

    for f in fields(AlertThresholds):
        env_var = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_var)
        if env_value is not None:
            merged[f.name] = env_value
            logger.debug(f"Overriding {f.name} from env: {env_var}")

    return merged


def load_alert_thresholds(config_path: Optional[str] = None) -> AlertThresholds:
    """
    Load alert thresholds from YAML file.

    Args:
        config_path: Path to config file (default: config/alert_thresholds.yaml)

    Returns:
        AlertThresholds (defaults when the file is missing or empty)

    Raises:
        ValueError: If the file cannot be parsed or thresholds are invalid
    """
    if config_path is None:
        project_root = Path(__file__).parent.parent.parent.parent
        config_path = project_root / "config" / "alert_thresholds.yaml"

    config_file = Path(config_path)

    data: Dict[str, Any] = {}
    if not config_file.exists():
        logger.warning(f"Alert threshold config not found: {config_file}, using defaults")
    else:
        try:
            with open(config_file, "r") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config: {e}") from e

        if not raw:
            logger.warning(f"Empty config file: {config_file}, using defaults")
        elif not isinstance(raw, dict):
            raise ValueError(f"Expected a mapping in {config_file}, got {type(raw).__name__}")
        else:
            data = raw.get("alert_thresholds", raw) or {}

    try:
        thresholds = AlertThresholds.from_dict(merge_thresholds_with_env(data))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid alert threshold value: {e}") from e

    errors = thresholds.validate()
    if errors:
        error_msg = "Alert threshold validation errors:\n" + "\n".join(f"  - {e}" for e in errors)
        logger.error(error_msg)
        raise ValueError(error_msg)

    if data:
        logger.info(f"✓ Loaded alert thresholds from {config_file}")
    logger.debug(f"  Alert thresholds: {thresholds}")

    return thresholds


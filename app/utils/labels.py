"""Bilingual answer labels"""
import yaml
import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_LABELS_PATH = Path(__file__).parent.parent.parent / "labels.yml"


class LabelCatalog:
    """Maps stored answer values to display labels from labels.yml"""

    def __init__(self, labels_file_path: Path = None):
        if labels_file_path is None:
            labels_file_path = DEFAULT_LABELS_PATH

        self.sections = self._load_labels(Path(labels_file_path))

    def _load_labels(self, file_path: Path) -> Dict[str, Dict[str, Dict[str, str]]]:
        """Load label sections from YAML file"""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load labels from {file_path}: {e}")
            return {}

    def label(self, section: str, value, language: str = "en") -> str:
        """Label for a value, falling back to the raw value when unknown"""
        raw = getattr(value, "value", value)
        return self.sections.get(section, {}).get(language, {}).get(raw, str(raw))

    def question(self, field: str, language: str = "en") -> str:
        return self.label("questions", field, language)

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from pathlib import Path

from loguru import logger

from papernotes.templates import DEFAULT_TEMPLATE

DEFAULT_FOLDER = "papers"
DEFAULT_PDF_FOLDER = "_pdfs"


class FileNameFormat(str, Enum):
    TITLE = "title"
    ID = "id"


@dataclass(frozen=True)
class Settings:
    template: str = DEFAULT_TEMPLATE
    authors_as_link: bool = True
    file_name_format: FileNameFormat = FileNameFormat.TITLE
    folder: str = DEFAULT_FOLDER
    pdf_folder: str = DEFAULT_PDF_FOLDER
    download_pdf: bool = True

    def __post_init__(self):
        # accept the stored string form, e.g. Settings(file_name_format="id")
        object.__setattr__(
            self, "file_name_format", FileNameFormat(self.file_name_format)
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["file_name_format"] = self.file_name_format.value
        return data


SETTING_NAMES = tuple(f.name for f in fields(Settings))
BOOLEAN_SETTINGS = ("authors_as_link", "download_pdf")


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "on", "1"):
        return True
    if lowered in ("false", "no", "off", "0"):
        return False
    raise ValueError(f"Not a boolean: {value!r}")


def coerce_settings(data: dict) -> dict:
    """Validate and convert raw values (from JSON or the command line).

    Empty ``folder`` / ``pdf_folder`` fall back to their defaults.
    """
    unknown = set(data) - set(SETTING_NAMES)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
    coerced = dict(data)
    for name in BOOLEAN_SETTINGS:
        if isinstance(coerced.get(name), str):
            coerced[name] = parse_bool(coerced[name])
    if "file_name_format" in coerced:
        coerced["file_name_format"] = FileNameFormat(coerced["file_name_format"])
    if coerced.get("folder") == "":
        coerced["folder"] = DEFAULT_FOLDER
    if coerced.get("pdf_folder") == "":
        coerced["pdf_folder"] = DEFAULT_PDF_FOLDER
    return coerced


def default_settings_path() -> Path:
    if "PAPERNOTES_SETTINGS" in os.environ:
        return Path(os.environ["PAPERNOTES_SETTINGS"])
    return Path.home() / ".config" / "papernotes" / "settings.json"


class SettingsStore:
    """Loads, updates and persists :class:`Settings` as a JSON file.

    Settings are immutable; :meth:`update` returns a new value and writes it
    to disk straight away.
    """

    def __init__(self, path: Path = None):
        self.path = Path(path) if path is not None else default_settings_path()

    def load(self) -> Settings:
        if not self.path.exists():
            logger.debug("No settings file at {}; using defaults", self.path)
            return Settings()
        stored = json.loads(self.path.read_text(encoding="utf-8"))
        # keys from other versions are dropped rather than rejected
        stored = {k: v for k, v in stored.items() if k in SETTING_NAMES}
        logger.debug("Loaded settings from {}", self.path)
        return Settings(**coerce_settings(stored))

    def save(self, settings: Settings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(settings.to_dict(), indent=2) + "\n", encoding="utf-8"
        )
        logger.debug("Saved settings to {}", self.path)

    def update(self, **changes) -> Settings:
        settings = replace(self.load(), **coerce_settings(changes))
        self.save(settings)
        return settings

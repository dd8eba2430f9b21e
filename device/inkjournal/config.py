"""Configuration management for InkJournal."""

import os
from dataclasses import dataclass, field
from typing import Optional

import yaml

DEFAULT_HOME = os.path.join(os.path.expanduser("~"), ".inkjournal")


@dataclass
class StorageConfig:
    notes_dir: str = os.path.join(DEFAULT_HOME, "notes")


@dataclass
class SmoothingConfig:
    enabled: bool = True
    window_size: int = 4


@dataclass
class RecognitionConfig:
    enabled: bool = True
    url: str = "https://inputtools.google.com/request?ime=handwriting&app=inkjournal"
    language: str = "en"
    timeout: float = 10.0
    writing_area_width: int = 1080
    writing_area_height: int = 1920
    max_candidates: int = 10


@dataclass
class ExportConfig:
    output_dir: str = os.path.join(os.path.expanduser("~"), "Downloads")
    smooth_strokes: bool = True
    font_path: str = ""
    stroke_width: float = 3.0


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = os.path.join(DEFAULT_HOME, "inkjournal.log")
    max_size_mb: int = 10
    backup_count: int = 3


@dataclass
class InkJournalConfig:
    storage: StorageConfig = field(default_factory=StorageConfig)
    smoothing: SmoothingConfig = field(default_factory=SmoothingConfig)
    recognition: RecognitionConfig = field(default_factory=RecognitionConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "InkJournalConfig":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        config = cls()

        if "storage" in data:
            st = data["storage"]
            config.storage = StorageConfig(
                notes_dir=os.path.expanduser(st.get("notes_dir", config.storage.notes_dir)),
            )

        if "smoothing" in data:
            s = data["smoothing"]
            config.smoothing = SmoothingConfig(
                enabled=s.get("enabled", True),
                window_size=s.get("window_size", 4),
            )

        if "recognition" in data:
            r = data["recognition"]
            defaults = RecognitionConfig()
            config.recognition = RecognitionConfig(
                enabled=r.get("enabled", True),
                url=r.get("url", defaults.url),
                language=r.get("language", "en"),
                timeout=r.get("timeout", 10.0),
                writing_area_width=r.get("writing_area_width", 1080),
                writing_area_height=r.get("writing_area_height", 1920),
                max_candidates=r.get("max_candidates", 10),
            )

        if "export" in data:
            e = data["export"]
            config.export = ExportConfig(
                output_dir=os.path.expanduser(e.get("output_dir", config.export.output_dir)),
                smooth_strokes=e.get("smooth_strokes", True),
                font_path=e.get("font_path", ""),
                stroke_width=e.get("stroke_width", 3.0),
            )

        if "logging" in data:
            lg = data["logging"]
            config.logging = LoggingConfig(
                level=lg.get("level", "INFO"),
                file=os.path.expanduser(lg.get("file", config.logging.file)),
                max_size_mb=lg.get("max_size_mb", 10),
                backup_count=lg.get("backup_count", 3),
            )

        return config

    @classmethod
    def load(cls, path: Optional[str] = None) -> "InkJournalConfig":
        """Load config from path, falling back to defaults."""
        search_paths = [
            path,
            os.environ.get("INKJOURNAL_CONFIG"),
            os.path.join(DEFAULT_HOME, "config.yaml"),
            "/etc/inkjournal/config.yaml",
        ]
        for p in search_paths:
            if p and os.path.isfile(p):
                return cls.from_yaml(p)
        return cls()

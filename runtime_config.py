"""Helper-Funktionen, um statische und dynamische Konfiguration zu trennen.

Die Anwendung liest ``config.ini`` als Basis. Lokale Anpassungen (z.B. ein
abweichender Katalogpfad oder Log-Level auf einem Entwicklerrechner) liegen in
``config.runtime.ini`` daneben und überschreiben einzelne Schlüssel. Über die
Umgebungsvariable ``ICON_SEARCH_CONFIG`` (auch aus ``.env``) lässt sich eine
andere Basisdatei wählen.
"""

from __future__ import annotations

import configparser
import os
from pathlib import Path
from typing import Dict, Optional

CONFIG_ENV_VAR = "ICON_SEARCH_CONFIG"
CONFIG_MAIN_PATH = Path(__file__).resolve().parent / "config.ini"


def config_main_path() -> Path:
    """Pfad der Basiskonfiguration (Umgebungsvariable vor Standard)."""
    override = os.getenv(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return CONFIG_MAIN_PATH


def runtime_path_for(main_path: Path) -> Path:
    return main_path.with_name(main_path.stem + ".runtime" + main_path.suffix)


def load_base_config(path: Optional[Path] = None) -> configparser.ConfigParser:
    """Lädt ausschließlich die statische Grundkonfiguration."""
    cfg = configparser.ConfigParser()
    cfg.read(path or config_main_path(), encoding="utf-8-sig")
    return cfg


def load_runtime_config(path: Optional[Path] = None) -> configparser.ConfigParser:
    """Lädt nur die dynamische Laufzeitkonfiguration."""
    cfg = configparser.ConfigParser()
    runtime = runtime_path_for(path or config_main_path())
    if runtime.exists():
        cfg.read(runtime, encoding="utf-8-sig")
    return cfg


def load_merged_config(path: Optional[Path] = None) -> configparser.ConfigParser:
    """Kombiniert statische und dynamische Konfiguration."""
    base = load_base_config(path)
    runtime = load_runtime_config(path)
    for section in runtime.sections():
        if not base.has_section(section):
            base.add_section(section)
        for key, value in runtime.items(section):
            base.set(section, key, value)
    return base


def save_runtime_config(cfg: configparser.ConfigParser, path: Optional[Path] = None) -> None:
    """Persistiert die Laufzeitdaten in ``config.runtime.ini``."""
    runtime = runtime_path_for(path or config_main_path())
    runtime.parent.mkdir(parents=True, exist_ok=True)
    with runtime.open("w", encoding="utf-8") as fh:
        cfg.write(fh)


def update_runtime_section(section: str, updates: Dict[str, str], path: Optional[Path] = None) -> None:
    """Aktualisiert gezielt ein Konfigurations-Teilsegment."""
    cfg = load_runtime_config(path)
    if not cfg.has_section(section):
        cfg.add_section(section)
    for key, value in updates.items():
        cfg.set(section, key, value)
    save_runtime_config(cfg, path)

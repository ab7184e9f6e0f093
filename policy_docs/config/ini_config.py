########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

INI_DEFAULT_NAME = "policy_docs.ini"


@dataclass(frozen=True)
class AppSettings:
    template_dir: Path
    pdf_dir: Path
    docx_dir: Path
    static_dir: Path

    pdf_page_size: str
    pdf_margin: str

    timeout_seconds: int

    flask_host: str
    flask_port: int
    flask_debug: bool
    max_content_mb: int


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the service and web code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_path(self, section: str, key: str, default: str) -> Path:
        """
        Reads a filesystem path from INI. Relative paths stay relative to the working directory.
        Tries [paths] and [path] interchangeably for convenience.
        """
        sections_to_try = [section]
        if section == "paths":
            sections_to_try.append("path")
        if section == "path":
            sections_to_try.append("paths")

        raw = ""
        for sec in sections_to_try:
            if not self._cfg.has_section(sec):
                continue
            raw = (self._cfg.get(sec, key, fallback="") or "").strip()
            if raw:
                break

        raw = os.path.expandvars(os.path.expanduser(raw or default))
        return Path(raw)

    def load_settings(self) -> AppSettings:
        # Output stores
        template_dir = self._cfg_path("paths", "template_dir", "templates")
        pdf_dir = self._cfg_path("paths", "pdf_dir", "PDF")
        docx_dir = self._cfg_path("paths", "docx_dir", "Editaveis")
        static_dir = self._cfg_path("paths", "static_dir", "public")

        # PDF rendering
        pdf_page_size = (self._cfg.get("pdf", "page_size", fallback="A4") or "").strip() or "A4"
        pdf_margin = (self._cfg.get("pdf", "margin", fallback="1in") or "").strip() or "1in"

        # Execution
        timeout_seconds = self._cfg.getint("execution", "timeout_seconds", fallback=120)

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=3000)
        port_env = (os.getenv("PORT") or "").strip()
        if port_env.isdigit():
            flask_port = int(port_env)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)
        max_content_mb = self._cfg.getint("flask", "max_content_mb", fallback=10)

        # Validate
        if timeout_seconds <= 0:
            raise ValueError(f"execution.timeout_seconds must be positive, got {timeout_seconds}")

        return AppSettings(
            template_dir=template_dir,
            pdf_dir=pdf_dir,
            docx_dir=docx_dir,
            static_dir=static_dir,
            pdf_page_size=pdf_page_size,
            pdf_margin=pdf_margin,
            timeout_seconds=timeout_seconds,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            max_content_mb=max_content_mb,
        )

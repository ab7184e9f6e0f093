from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from policy_docs.config.ini_config import AppSettings, IniConfig
from policy_docs.repositories.policy_repository import PolicyRepository
from policy_docs.repositories.storage_layout import StorageLayout
from policy_docs.services.converters import DocxConverter, PdfConverter
from policy_docs.services.filename_deriver import TimestampFilenameDeriver
from policy_docs.services.policy_service import PolicyService
from policy_docs.web.routes import create_blueprint


def build_policy_service(settings: AppSettings) -> PolicyService:
    layout = StorageLayout(
        template_dir=settings.template_dir,
        pdf_dir=settings.pdf_dir,
        docx_dir=settings.docx_dir,
    )
    return PolicyService(
        layout=layout,
        filename_deriver=TimestampFilenameDeriver(),
        pdf_converter=PdfConverter(page_size=settings.pdf_page_size, margin=settings.pdf_margin),
        docx_converter=DocxConverter(),
    )


def create_app(
    settings: Optional[AppSettings] = None,
    policy_service: Optional[PolicyService] = None,
) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()
    if policy_service is None:
        policy_service = build_policy_service(settings)

    policy_repo = PolicyRepository(pdf_dir=settings.pdf_dir)

    app = Flask(__name__, static_folder=str(settings.static_dir), static_url_path="")
    CORS(app)
    app.register_blueprint(
        create_blueprint(
            policy_service,
            policy_repo,
            static_dir=settings.static_dir,
            timeout_seconds=settings.timeout_seconds,
        )
    )

    app.config["MAX_CONTENT_LENGTH"] = settings.max_content_mb * 1024 * 1024
    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app

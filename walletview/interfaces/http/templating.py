"""Jinja2 template environment shared by the page routers."""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from walletview.core.config import Settings, get_settings

PACKAGE_DIR = Path(__file__).resolve().parents[2]


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (PACKAGE_DIR / path).resolve()


def build_templates(settings: Settings) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(_resolve_path(settings.template_dir)))
    templates.env.globals["project_name"] = settings.project_name
    return templates


templates = build_templates(get_settings())

__all__ = ["build_templates", "templates"]

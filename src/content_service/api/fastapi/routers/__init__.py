from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import Optional

from fastapi import FastAPI

logger = logging.getLogger(__name__)


def register_all_routers(
        app: FastAPI,
        *,
        base_package: Optional[str] = None,
        prefix: str = "",
) -> None:
    """
    Discover and register every FastAPI router under a routers package.

    Any module with a top-level `router` variable is included. Modules whose
    final segment starts with '_' are skipped. A module may set ROUTER_PREFIX
    or ROUTER_TAG to adjust how its router is mounted.
    """
    if base_package is None:
        base_package = __name__

    package_module: ModuleType = importlib.import_module(base_package)
    if not hasattr(package_module, "__path__"):
        raise RuntimeError(f"Provided base_package '{base_package}' is not a package (no __path__).")

    for _, module_name, _ in pkgutil.walk_packages(package_module.__path__, prefix=f"{base_package}."):
        if module_name.rsplit(".", 1)[-1].startswith("_"):
            continue
        try:
            module = importlib.import_module(module_name)
        except Exception:
            logger.exception("Failed to import router module %s", module_name)
            raise
        router = getattr(module, "router", None)
        if router is None:
            continue
        include_kwargs: dict = {"prefix": prefix}
        router_prefix = getattr(module, "ROUTER_PREFIX", None)
        if router_prefix:
            include_kwargs["prefix"] = prefix.rstrip("/") + router_prefix
        router_tag = getattr(module, "ROUTER_TAG", None)
        if router_tag:
            include_kwargs["tags"] = [router_tag]
        app.include_router(router, **include_kwargs)
        logger.debug("Included router from module: %s (prefix=%s)", module_name, include_kwargs["prefix"])

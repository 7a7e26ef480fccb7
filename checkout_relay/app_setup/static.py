"""
Montage des fichiers statiques.
Expose public/ à la racine, après les routes de l'API (qui restent prioritaires).
"""
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from checkout_relay.config import PUBLIC_DIR


def mount_static_files(app: FastAPI, directory: Optional[Path] = None) -> bool:
    """
    Monte le répertoire public s'il existe; retourne True si monté.
    - Sans répertoire public, le service reste une API pure.
    """
    directory = directory or PUBLIC_DIR
    if not directory.is_dir():
        return False
    app.mount("/", StaticFiles(directory=str(directory), html=True), name="public")
    return True

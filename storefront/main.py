# storefront/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .catalog import catalog_router
from .storage import CatalogStore, JsonFileStore


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    app = FastAPI(
        title="Storefront",
        description=(
            "Petite boutique : liste des produits et ajout de nouveaux "
            "produits, stockés dans un fichier JSON."
        ),
        version="1.0.0",
    )
    app.state.store = store if store is not None else JsonFileStore(config.DB_PATH)

    # CORS pour la vue catalogue servie depuis une autre origine
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # 🔹 Route de base pour tester rapidement
    @app.get("/")
    def health_check():
        return {"status": "ok", "message": "Storefront live 🛍️"}

    app.include_router(catalog_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="127.0.0.1", port=8000)

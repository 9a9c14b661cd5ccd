from fastapi import FastAPI

from lovematch.api.routers.profiles import router as profiles_router


def create_app() -> FastAPI:
    app = FastAPI(title="LoveMatch Bot API")

    app.include_router(profiles_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app

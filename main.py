import uvicorn
from fastapi import FastAPI
from settings.config import settings
from db.db_operation import MongoConnection
from core.exceptions import register_exception_handlers
from utils.logger import setup_logging, get_logger
from routes import auth, restaurant_routes, menu_routes

setup_logging(settings.LOG_LEVEL)
logger = get_logger("main")

app = FastAPI(title="Food Delivery API", version="1.0.0")
register_exception_handlers(app)

@app.get("/")
async def health_check():
    logger.info("Health check is successful")
    return {
        "status": "ok",
        "app": settings.PROJECT_NAME,
        "message": "FastAPI is running"
    }

@app.on_event("startup")
async def startup_event():
    mongo = MongoConnection()
    await mongo.connect()
    await mongo.create_indexes()
    app.state.mongo = mongo

@app.on_event("shutdown")
async def shutdown_event():
    mongo = getattr(app.state, "mongo", None)
    if mongo is not None:
        mongo.close()
        app.state.mongo = None

app.include_router(auth.router)
app.include_router(restaurant_routes.router)
app.include_router(menu_routes.router)

if __name__ == "__main__":
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)

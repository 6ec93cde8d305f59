import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from src import config
from src.errors import ReceiptError
from src.model.schemas import parse_receipt
from src.store.backend import MemoryBackend
from src.store.receipts import ReceiptStore

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Receipt Points Service")

receipt_store = ReceiptStore(MemoryBackend())


def get_store() -> ReceiptStore:
    return receipt_store


@app.exception_handler(ReceiptError)
async def receipt_error_handler(request: Request, exc: ReceiptError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.post("/receipts/process")
async def process_receipt(request: Request, store: ReceiptStore = Depends(get_store)):
    receipt = parse_receipt(await request.body())
    return {"id": store.create_receipt(receipt)}


@app.get("/receipts/{receipt_id}/points")
async def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    return {"points": store.get_points(receipt_id)}


@app.get("/receipts/{receipt_id}")
async def get_receipt(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    return store.get_receipt(receipt_id).to_record()


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("src.app:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)

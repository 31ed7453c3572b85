from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pathlib import Path
import json
import os

app = FastAPI(title="Mock Seed Dataset Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/seed_data") if os.path.exists("/seed_data") else Path(__file__).resolve().parent

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/{dataset}.json")
def get_dataset(dataset: str):
    file = DATA_DIR / f"{dataset}.json"
    if not file.exists():
        raise HTTPException(status_code=404, detail="dataset not found")
    return JSONResponse(content=json.loads(file.read_text()))

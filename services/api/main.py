import logging
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel

from review_engine.config import setup_logging
from review_engine.engine import review_code
from review_engine.languages import Language, detect_language
from review_engine.rules import rulebook_as_dict

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Debug Review API")


class DetectRequest(BaseModel):
    code: str


class AnalyzeRequest(BaseModel):
    code: str
    language: Optional[Language] = None  # skip detection when given


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/detect")
def detect(req: DetectRequest):
    return {"language": detect_language(req.code).value}


@app.post("/analyze")
def analyze_code(req: AnalyzeRequest):
    report = review_code(req.code, language=req.language)
    logger.info(
        "POST /analyze: language=%s findings=%d tips=%d",
        report.language.value,
        len(report.findings),
        len(report.tips),
    )
    return report.to_dict()


@app.get("/rules")
def rules():
    return rulebook_as_dict()

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from fastapi.middleware.cors import CORSMiddleware
from typing import List, Optional

from algorithms.lcs import lcs_length
from algorithms.similarity import (
    compare_similarity,
    find_best_similarity,
    get_similarity_ratings,
    rank_similarities,
)
from utils.config import settings
from utils.logger import logger

app = FastAPI(title="Similar String API", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class PairRequest(BaseModel):
    a: str
    b: str

class CandidatesRequest(BaseModel):
    target: str
    candidates: List[str]

class LcsResponse(BaseModel):
    length: int

class CompareResponse(BaseModel):
    similarity: float

class MatchOut(BaseModel):
    candidate: str
    similarity: float

class BestResponse(BaseModel):
    match: Optional[MatchOut] = None  # null when there are no candidates

class RatingsResponse(BaseModel):
    ratings: Optional[List[float]] = None

class RankResponse(BaseModel):
    ranking: Optional[List[MatchOut]] = None


def _score(x: float) -> float:
    return round(x, settings.SCORE_DIGITS)

def _check_texts(*texts: str):
    for t in texts:
        if len(t) > settings.MAX_TEXT_LENGTH:
            logger.warning("rejected text of length {} (limit {})", len(t), settings.MAX_TEXT_LENGTH)
            raise HTTPException(
                status_code=413,
                detail=f"text longer than {settings.MAX_TEXT_LENGTH} characters",
            )

def _check_candidates(req: CandidatesRequest):
    if len(req.candidates) > settings.MAX_CANDIDATES:
        logger.warning("rejected {} candidates (limit {})", len(req.candidates), settings.MAX_CANDIDATES)
        raise HTTPException(
            status_code=413,
            detail=f"more than {settings.MAX_CANDIDATES} candidates",
        )
    _check_texts(req.target, *req.candidates)


@app.get("/health")
def health():
    return {"ok": True}

@app.post("/api/lcs", response_model=LcsResponse)
def lcs(req: PairRequest):
    _check_texts(req.a, req.b)
    length = lcs_length(req.a, req.b)
    logger.info("lcs len(a)={} len(b)={} -> {}", len(req.a), len(req.b), length)
    return LcsResponse(length=length)

@app.post("/api/compare", response_model=CompareResponse)
def compare(req: PairRequest):
    _check_texts(req.a, req.b)
    sim = compare_similarity(req.a, req.b)
    logger.info("compare len(a)={} len(b)={} -> {:.4f}", len(req.a), len(req.b), sim)
    return CompareResponse(similarity=_score(sim))

@app.post("/api/best", response_model=BestResponse)
def best(req: CandidatesRequest):
    _check_candidates(req)
    found = find_best_similarity(req.target, req.candidates)
    logger.info("best over {} candidates -> {}", len(req.candidates), found is not None)
    if found is None:
        return BestResponse(match=None)
    return BestResponse(match=MatchOut(candidate=found.candidate, similarity=_score(found.ratio)))

@app.post("/api/ratings", response_model=RatingsResponse)
def ratings(req: CandidatesRequest):
    _check_candidates(req)
    found = get_similarity_ratings(req.target, req.candidates)
    logger.info("ratings over {} candidates", len(req.candidates))
    if found is None:
        return RatingsResponse(ratings=None)
    return RatingsResponse(ratings=[_score(r) for r in found])

@app.post("/api/rank", response_model=RankResponse)
def rank(req: CandidatesRequest):
    _check_candidates(req)
    ranked = rank_similarities(req.target, req.candidates)
    logger.info("rank over {} candidates", len(req.candidates))
    if ranked is None:
        return RankResponse(ranking=None)
    return RankResponse(
        ranking=[MatchOut(candidate=m.candidate, similarity=_score(m.ratio)) for m in ranked]
    )

# Run with (pip install ".[server]"): uvicorn api.main:app --host 0.0.0.0 --port 8000

from __future__ import annotations
from typing import List, Optional, Dict, Any
from fastapi import FastAPI
from pydantic import BaseModel, Field
from fastapi.middleware.cors import CORSMiddleware
from wrongle.app import solve_wordle, SolveParams
from wrongle.signature import DEFAULT_REFERENCE_LETTERS

app = FastAPI(title="Wrong Wordle API", version="1.0")

# CORS: allow browser frontend to call backend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class SolveRequest(BaseModel):
    answers: List[str] = Field(..., description="Answer words, five letters a-z.")
    guesses: List[str] = Field(..., description="Guess words, five letters a-z.")
    reference: str = DEFAULT_REFERENCE_LETTERS
    auto_reference: bool = False
    include_packings: bool = False
    limit: Optional[int] = Field(None, ge=0, description="Return at most this many solutions.")

@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True}

@app.post("/solve")
def solve(req: SolveRequest) -> Dict[str, Any]:
    # Requests are small; a process pool would cost more than it saves.
    params = SolveParams(
        workers=1,
        reference=req.reference,
        auto_reference=req.auto_reference,
        include_packings=req.include_packings,
        limit=req.limit,
    )
    return solve_wordle(req.answers, req.guesses, params)

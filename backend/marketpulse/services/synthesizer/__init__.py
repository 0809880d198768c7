"""
Market Synthesizer Service

CONTRACT:
    Input:  SynthesisRequest (price, strike interval, seed, as-of date)
    Output: SyntheticMarket

RESPONSIBILITIES:
    - Derive the seed bucket from an injected instant
    - Generate intraday bars and ATM option premium series
    - Generate the IV smile and a 21-strike option chain with Greeks
    - Generate FII/DII institutional flows

Deterministic: identical seed => identical output.
"""

from marketpulse.services.synthesizer.interface import SynthesizerServiceInterface
from marketpulse.services.synthesizer.prng import seeded_random, mulberry32
from marketpulse.services.synthesizer.seed import SeedContext, derive_seed
from marketpulse.services.synthesizer.service import (
    SynthesizerService,
    get_synthesizer_service,
    synthesize_market,
)

__all__ = [
    "SynthesizerServiceInterface",
    "SynthesizerService",
    "get_synthesizer_service",
    "synthesize_market",
    "seeded_random",
    "mulberry32",
    "SeedContext",
    "derive_seed",
]

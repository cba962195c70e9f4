from __future__ import annotations

import re
from typing import Dict

from task_manager.models import Sentiment

# AFINN-style word valences, -5 (very negative) .. +5 (very positive)
LEXICON: Dict[str, int] = {
    "amazing": 4, "awesome": 4, "excellent": 3, "fantastic": 4, "great": 3,
    "good": 3, "nice": 3, "happy": 3, "glad": 3, "love": 3, "enjoy": 2,
    "excited": 3, "exciting": 3, "fun": 4, "win": 4, "success": 2,
    "successful": 3, "improve": 2, "improved": 2, "improvement": 2,
    "benefit": 2, "easy": 1, "clean": 2, "celebrate": 3, "thanks": 2,
    "thank": 2, "helpful": 2, "help": 2, "positive": 2, "opportunity": 2,
    "progress": 2, "achieve": 2, "achievement": 2, "better": 2, "best": 3,
    "perfect": 3, "smooth": 2, "favorite": 2, "interesting": 2, "welcome": 2,
    "bad": -3, "terrible": -3, "awful": -3, "horrible": -3, "worst": -3,
    "worse": -3, "hate": -3, "angry": -3, "annoying": -2, "annoyed": -2,
    "sad": -2, "fail": -2, "failed": -2, "failing": -2, "failure": -2,
    "broken": -1, "break": -1, "bug": -2, "bugs": -2, "crash": -2,
    "crashes": -2, "error": -2, "errors": -2, "problem": -2, "problems": -2,
    "issue": -1, "issues": -1, "difficult": -1, "hard": -1, "painful": -2,
    "pain": -2, "stress": -1, "stressful": -2, "stressed": -2, "worried": -3,
    "worry": -3, "tired": -2, "boring": -3, "slow": -2, "delay": -1,
    "delayed": -1, "blocked": -1, "stuck": -2, "urgent": -1, "critical": -2,
    "emergency": -2, "panic": -3, "mess": -2, "messy": -2, "ugly": -3,
    "complaint": -2, "complain": -2, "risk": -2, "wrong": -2, "lost": -3,
}

_TOKEN = re.compile(r"[a-z]+(?:'[a-z]+)?")


def score_sentiment(text: str) -> float:
    """Average lexicon valence over all word tokens; 0.0 for empty text."""
    tokens = _TOKEN.findall((text or "").lower())
    if not tokens:
        return 0.0
    return sum(LEXICON.get(t, 0) for t in tokens) / len(tokens)


def classify_sentiment(text: str) -> Sentiment:
    score = score_sentiment(text)
    if score > 0:
        return "positive"
    if score < 0:
        return "negative"
    return "neutral"

# src/swap_agent/analyzers/lexicon_scorer.py
from swap_agent.analyzers.sentiment_result import SentimentSample
from swap_agent.analyzers.settings import AggregatorSettings


class LexiconScorer:
    """Additive-clamped keyword scorer.

    Every matching additive class adds its delta and lifts confidence to the
    class floor. Dampening classes then scale the running score toward zero.
    The result is clamped to [-1, 1].
    """

    def __init__(self, settings: AggregatorSettings | None = None):
        self._settings = settings or AggregatorSettings()
        self._additive = [c for c in self._settings.cue_classes if not c.is_dampening]
        self._dampening = [c for c in self._settings.cue_classes if c.is_dampening]

    def score(self, text: str) -> SentimentSample:
        """Score a single snippet."""
        lowered = (text or "").lower()
        score = 0.0
        confidence = self._settings.base_confidence
        keywords: list[str] = []

        for cue_class in self._additive:
            if self._matches(cue_class.cues, lowered):
                score += cue_class.delta
                if cue_class.confidence_floor is not None:
                    confidence = max(confidence, cue_class.confidence_floor)
                keywords.extend(cue_class.keywords)

        for cue_class in self._dampening:
            if self._matches(cue_class.cues, lowered):
                score *= cue_class.multiplier
                keywords.extend(cue_class.keywords)

        score = max(-1.0, min(1.0, score))
        return SentimentSample(text=text, score=score, confidence=confidence, keywords=tuple(keywords))

    @staticmethod
    def _matches(cues: list[str], lowered: str) -> bool:
        return any(cue.lower() in lowered for cue in cues)

# knowledge.py
import threading

import responses

FACT_MATCH_POLICIES = ("first", "longest")


class KnowledgeBase:
    """Greetings, facts, jokes and fallback lines a Responder answers from.

    Facts are the only mutable part: keys are lowercase trigger phrases and a
    message matches a fact when it contains the phrase anywhere. teach() and
    lookup() share a lock so the server can run threaded.
    """

    def __init__(self, greetings, facts, jokes, fallbacks, capitals=None):
        if not greetings or not jokes or not fallbacks:
            raise ValueError("greetings, jokes and fallbacks must not be empty")
        self.greetings = list(greetings)
        self.jokes = list(jokes)
        self.fallbacks = list(fallbacks)
        self.capitals = {k.lower(): v for k, v in (capitals or {}).items()}
        self._facts = {}
        self._lock = threading.Lock()
        for question, answer in facts.items():
            self.teach(question, answer)

    @classmethod
    def default(cls):
        return cls(
            greetings=responses.greetings,
            facts=responses.facts,
            jokes=responses.jokes,
            fallbacks=responses.fallbacks,
            capitals=responses.capitals,
        )

    def teach(self, question: str, answer: str) -> None:
        question = (question or "").strip()
        answer = (answer or "").strip()
        if not question or not answer:
            raise ValueError("question and answer must both be non-empty")
        with self._lock:
            self._facts[question.lower()] = answer

    def lookup(self, text: str, policy: str = "first"):
        """Return the answer of a fact whose phrase occurs in text, or None."""
        if policy not in FACT_MATCH_POLICIES:
            raise ValueError(f"unknown fact match policy {policy!r}")
        low = text.lower()
        best = None
        with self._lock:
            for question, answer in self._facts.items():
                if question not in low:
                    continue
                if policy == "first":
                    return answer
                if best is None or len(question) > len(best[0]):
                    best = (question, answer)
        return best[1] if best else None

    def capital_of(self, country: str):
        return self.capitals.get(country.strip().lower())

    def facts(self) -> dict:
        """Snapshot copy of the fact table."""
        with self._lock:
            return dict(self._facts)

    def __len__(self):
        with self._lock:
            return len(self._facts)

    def __contains__(self, question):
        if not isinstance(question, str):
            return False
        with self._lock:
            return question.strip().lower() in self._facts

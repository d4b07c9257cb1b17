# chatbot.py
import random
import re
import threading

import responses
from arithmetic import evaluate, format_number, sanitize
from knowledge import FACT_MATCH_POLICIES, KnowledgeBase
from logger import logger

GREETING = re.compile(r"^(?:hi|hello|hey|sup|yo|what'?s up)\b")
ARITHMETIC = re.compile(r"what is\s+(.+?)\??$", re.DOTALL)
TEACH_PREFIX = "teach me:"
JOKE_WORDS = ("joke", "funny")

# remainder of "what is ..." that should be left to the calculator
_ARITHMETIC_TAIL = re.compile(r"[-+*/().0-9\s]+")


class Responder:
    """Turns a chat message into a reply.

    Rules are tried in a fixed order and the first one that produces a reply
    wins: greeting, teach, fact, pattern, arithmetic, joke, fallback.
    """

    def __init__(self, knowledge=None, rng=None, fact_match="first"):
        if fact_match not in FACT_MATCH_POLICIES:
            raise ValueError(f"unknown fact match policy {fact_match!r}")
        self.knowledge = knowledge if knowledge is not None else KnowledgeBase.default()
        self.rng = rng if rng is not None else random.Random()
        self.fact_match = fact_match
        self._build_rules()
        self.steps = [
            ("greeting", self._greet),
            ("teach", self._teach),
            ("fact", self._recall_fact),
            ("pattern", self._match_pattern),
            ("arithmetic", self._calculate),
            ("joke", self._tell_joke),
        ]

    def _build_rules(self):
        # rules: (compiled_pattern, handler(match) -> reply), first match wins
        self.rules = []
        self.rules.append((re.compile(r"capital of (?P<country>.+)", re.IGNORECASE), self._tell_capital))
        self.rules.append((re.compile(r"what is\s+(?P<subject>.+)", re.IGNORECASE), self._think_about))
        self.rules.append((re.compile(r"how does ", re.IGNORECASE), self._how_it_works))
        self.rules.append((re.compile(r"explain (.+)", re.IGNORECASE), lambda m: responses.EXPLAIN_REPLY))

    def _greet(self, text, low):
        if GREETING.search(low):
            return self.rng.choice(self.knowledge.greetings)
        return None

    def _teach(self, text, low):
        if not low.startswith(TEACH_PREFIX):
            return None
        question, sep, answer = text[len(TEACH_PREFIX):].partition("=>")
        question, answer = question.strip(), answer.strip()
        if not sep or not question or not answer:
            return responses.TEACH_FORMAT_HELP
        self.knowledge.teach(question, answer)
        logger.info("Learned fact %r -> %r", question.lower(), answer)
        return responses.TEACH_CONFIRM.format(question=question, answer=answer)

    def _recall_fact(self, text, low):
        return self.knowledge.lookup(low, policy=self.fact_match)

    def _match_pattern(self, text, low):
        for pattern, handler in self.rules:
            m = pattern.search(text)
            if not m:
                continue
            # a handler returning None passes the message on
            reply = handler(m)
            if reply:
                return reply
        return None

    def _think_about(self, match):
        subject = match.group('subject')
        expr = subject.rstrip()
        if expr.endswith("?"):
            expr = expr[:-1]
        if _ARITHMETIC_TAIL.fullmatch(expr):
            return None
        return responses.WHAT_IS_REPLY.format(subject=subject)

    def _how_it_works(self, match):
        # "how does <something> work" on the same line
        line = match.string[match.end():].split("\n", 1)[0].lower()
        if " work" not in line[1:]:
            return None
        return responses.HOW_DOES_REPLY

    def _tell_capital(self, match):
        country = match.group('country').strip().rstrip("?.!").strip()
        if not country:
            return None
        capital = self.knowledge.capital_of(country)
        if capital:
            return f"{capital}."
        return responses.UNKNOWN_CAPITAL.format(country=country)

    def _calculate(self, text, low):
        m = ARITHMETIC.search(low)
        if not m:
            return None
        expr = sanitize(m.group(1))
        try:
            result = format_number(evaluate(expr))
        except ValueError as e:
            # not arithmetic after all, let the later rules answer
            logger.debug("Could not evaluate %r: %s", expr, e)
            return None
        return f"**{expr} = {result}**"

    def _tell_joke(self, text, low):
        if any(word in low for word in JOKE_WORDS):
            return self.rng.choice(self.knowledge.jokes)
        return None

    def respond(self, text: str) -> str:
        text = (text or "").strip()
        low = text.lower()
        if text:
            for name, step in self.steps:
                try:
                    reply = step(text, low)
                except Exception:
                    logger.exception("Rule %s failed on %r", name, text)
                    continue
                if reply:
                    logger.debug("Rule %s answered %r", name, text)
                    return reply
        return self.rng.choice(self.knowledge.fallbacks)


_default_responder = None
_default_lock = threading.Lock()


def default_responder() -> Responder:
    """The process-wide Responder shared by think() and the Flask app."""
    global _default_responder
    with _default_lock:
        if _default_responder is None:
            _default_responder = Responder()
        return _default_responder


def set_default_responder(responder) -> None:
    global _default_responder
    with _default_lock:
        _default_responder = responder


def think(message: str) -> str:
    """Answer with the process-wide default Responder."""
    return default_responder().respond(message)

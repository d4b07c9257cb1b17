"""
Tests for the Responder rule chain
"""
import os
import random
import sys
import threading
import time
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import chatbot
import responses
from chatbot import Responder, think
from knowledge import KnowledgeBase


class FirstChoice:
    """rng stand-in that always picks the first line"""

    def choice(self, seq):
        return seq[0]


class TestResponder(unittest.TestCase):

    def setUp(self):
        self.bot = Responder(rng=random.Random(42))

    def test_greeting(self):
        for text in ["hi", "Hello there", "hey!", "sup", "yo", "what's up", "whats up?"]:
            with self.subTest(text=text):
                self.assertIn(self.bot.respond(text), responses.greetings)

    def test_greeting_needs_whole_word_at_start(self):
        self.assertNotIn(self.bot.respond("history of yoga"), responses.greetings)
        self.assertNotIn(self.bot.respond("say hi"), responses.greetings)

    def test_greeting_beats_fact(self):
        self.assertIn(self.bot.respond("hello, what is dna"), responses.greetings)

    def test_fact_lookup_is_stable(self):
        answer = responses.facts["what is dna"]
        for _ in range(5):
            self.assertEqual(self.bot.respond("What is DNA?"), answer)

    def test_fact_found_inside_sentence(self):
        self.assertEqual(
            self.bot.respond("so tell me, how old is the earth really"),
            responses.facts["how old is the earth"],
        )

    def test_capital_lookup(self):
        self.assertIn("Paris", self.bot.respond("capital of france"))
        self.assertIn("Tokyo", self.bot.respond("What is the capital of Japan?"))

    def test_unknown_capital(self):
        reply = self.bot.respond("capital of Narnia")
        self.assertIn("Teach me!", reply)
        self.assertIn("Narnia", reply)

    def test_what_is_pattern(self):
        reply = self.bot.respond("what is love")
        self.assertTrue(reply.startswith("Let me think: love is..."))

    def test_how_does_and_explain(self):
        self.assertEqual(self.bot.respond("how does a car work"), responses.HOW_DOES_REPLY)
        self.assertEqual(self.bot.respond("explain recursion"), responses.EXPLAIN_REPLY)
        self.assertEqual(self.bot.respond("How does it WORK?"), responses.HOW_DOES_REPLY)
        self.assertNotEqual(self.bot.respond("how does work"), responses.HOW_DOES_REPLY)

    def test_long_whitespace_runs_stay_fast(self):
        inputs = [
            "what is " + " " * 50000 + "1",
            "what is 1" + " " * 50000 + "x",
            "what is" + " " * 50000 + "\n1",
            "how does " * 20000,
        ]
        for text in inputs:
            with self.subTest(size=len(text)):
                start = time.perf_counter()
                self.bot.respond(text)
                self.assertLess(time.perf_counter() - start, 1.0)

    def test_whitespace_padded_arithmetic(self):
        self.assertEqual(self.bot.respond("what is " + " " * 50000 + "1"), "**1 = 1**")

    def test_non_ascii_digits_are_not_arithmetic(self):
        reply = self.bot.respond("what is \u0663+\u0663")
        self.assertTrue(reply.startswith("Let me think: \u0663+\u0663 is..."))

    def test_empty_capital_passes_on(self):
        bot = Responder(rng=FirstChoice())
        self.assertEqual(bot.respond("capital of ?"), responses.fallbacks[0])
        self.assertTrue(bot.respond("what is the capital of ?").startswith("Let me think:"))

    def test_arithmetic(self):
        self.assertEqual(self.bot.respond("what is 2+2"), "**2+2 = 4**")
        self.assertEqual(self.bot.respond("What is (3 + 4) * 2?"), "**(3+4)*2 = 14**")
        self.assertEqual(self.bot.respond("what is 7/2"), "**7/2 = 3.5**")

    def test_division_by_zero_falls_through(self):
        bot = Responder(rng=FirstChoice())
        self.assertEqual(bot.respond("what is 1/0"), responses.fallbacks[0])

    def test_broken_expression_falls_through(self):
        bot = Responder(rng=FirstChoice())
        self.assertEqual(bot.respond("what is 2+"), responses.fallbacks[0])

    @unittest.skipUnless(hasattr(sys, "get_int_max_str_digits"), "no int digit limit")
    def test_oversized_numbers_fall_through(self):
        bot = Responder(rng=FirstChoice())
        self.assertEqual(bot.respond("what is " + "9" * 5000), responses.fallbacks[0])
        # operands fit, the product is too long to print
        product = "what is " + "9" * 3000 + "*" + "9" * 3000
        self.assertEqual(bot.respond(product), responses.fallbacks[0])

    def test_teach_round_trip(self):
        reply = self.bot.respond("teach me: Who is Ada => The first programmer")
        self.assertEqual(reply, "Learned: **Who is Ada** → The first programmer")
        self.assertIn("The first programmer", self.bot.respond("who is ada"))
        self.assertIn("The first programmer", self.bot.respond("do you know who is Ada?"))

    def test_teach_overwrite(self):
        self.bot.respond("teach me: foo => bar")
        self.bot.respond("teach me: foo => baz")
        self.assertEqual(self.bot.respond("foo"), "baz")

    def test_teach_can_replace_builtin_fact(self):
        self.bot.respond("Teach me: what is dna => A molecule.")
        self.assertEqual(self.bot.respond("what is dna"), "A molecule.")

    def test_teach_splits_on_first_arrow(self):
        self.bot.respond("teach me: arrow => => is an arrow")
        self.assertEqual(self.bot.respond("arrow"), "=> is an arrow")

    def test_teach_format_help(self):
        for text in ["teach me: nothing here", "teach me: => answer", "teach me: question =>", "teach me:"]:
            with self.subTest(text=text):
                self.assertEqual(self.bot.respond(text), responses.TEACH_FORMAT_HELP)

    def test_joke(self):
        self.assertIn(self.bot.respond("tell me a joke"), responses.jokes)
        self.assertIn(self.bot.respond("say something FUNNY"), responses.jokes)

    def test_fallback(self):
        self.assertIn(self.bot.respond("xyzzy plugh"), responses.fallbacks)

    def test_blank_input_gets_fallback(self):
        self.assertIn(self.bot.respond("   "), responses.fallbacks)

    def test_always_returns_text(self):
        inputs = ["?", "what is", "what is ?", "capital of", "teach me", "((((", "=>", "2+2", "ÿ" * 50]
        for text in inputs:
            with self.subTest(text=text):
                reply = self.bot.respond(text)
                self.assertIsInstance(reply, str)
                self.assertTrue(reply)

    def test_failing_rule_is_skipped(self):
        class BrokenKnowledge(KnowledgeBase):
            def lookup(self, text, policy="first"):
                raise RuntimeError("boom")

        kb = BrokenKnowledge(greetings=["hi"], facts={}, jokes=["ha"], fallbacks=["meh"])
        bot = Responder(knowledge=kb, rng=FirstChoice())
        with self.assertLogs("thinkbot", level="ERROR"):
            self.assertEqual(bot.respond("tell me a joke"), "ha")

    def test_longest_fact_match(self):
        kb = KnowledgeBase(
            greetings=["hi"],
            facts={"python": "A snake.", "python programming": "A language."},
            jokes=["ha"],
            fallbacks=["meh"],
        )
        self.assertEqual(Responder(knowledge=kb).respond("python programming tips"), "A snake.")
        bot = Responder(knowledge=kb, fact_match="longest")
        self.assertEqual(bot.respond("python programming tips"), "A language.")

    def test_rejects_unknown_fact_match(self):
        with self.assertRaises(ValueError):
            Responder(fact_match="shortest")

    def test_seeded_rng_is_deterministic(self):
        a = Responder(rng=random.Random(7))
        b = Responder(rng=random.Random(7))
        self.assertEqual([a.respond("hmm ok") for _ in range(5)], [b.respond("hmm ok") for _ in range(5)])


class TestThink(unittest.TestCase):

    def tearDown(self):
        chatbot._default_responder = None

    def test_think_uses_shared_responder(self):
        think("teach me: shared => yes")
        self.assertEqual(think("shared"), "yes")

    def test_default_responder_created_once(self):
        chatbot._default_responder = None
        seen = []

        def grab():
            seen.append(chatbot.default_responder())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(seen), 8)
        self.assertTrue(all(r is seen[0] for r in seen))

    def test_set_default_responder(self):
        bot = Responder(rng=FirstChoice())
        chatbot.set_default_responder(bot)
        bot.respond("teach me: swapped => in")
        self.assertEqual(think("swapped"), "in")


if __name__ == "__main__":
    unittest.main()

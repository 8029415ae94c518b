# dev_tests/test_app.py
"""Smoke tests for the Streamlit front end (app.py) using streamlit's AppTest."""

import os
import sys
import unittest

from streamlit.testing.v1 import AppTest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

APP_PATH = os.path.join(ROOT_DIR, "app.py")


class TestStreamlitApp(unittest.TestCase):
    def setUp(self):
        self.at = AppTest.from_file(APP_PATH, default_timeout=30)
        self.at.run()

    def test_loads_without_exception(self):
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.session_state["index"].count(), 49)
        self.assertEqual(self.at.success[0].value, "✅ Found 49 matches")

    def test_search_prefix(self):
        self.at.text_input[0].input("AP").run()
        self.assertEqual(self.at.success[0].value, "✅ Found 6 matches")

    def test_search_no_match(self):
        self.at.text_input[0].input("xyz").run()
        self.assertEqual(self.at.error[0].value, "❌ No suggestions found for \"xyz\"")

    def test_statistics_page(self):
        self.at.sidebar.selectbox[0].select("Statistics").run()
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.metric[0].value, "49")

    def test_help_page(self):
        self.at.sidebar.selectbox[0].select("Help").run()
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.main.header[0].value, "Help & Documentation")

    def submit_word(self, word):
        self.at.main.text_input[0].input(word)
        self.at.main.button[0].click()
        self.at.run()

    def test_add_word_then_duplicate(self):
        self.at.sidebar.selectbox[0].select("Add Word").run()
        self.submit_word("Zebra")
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.success[0].value, "✅ Successfully added \"Zebra\" to dictionary!")
        self.assertEqual(self.at.session_state["index"].count(), 50)

        self.submit_word("zebra")
        self.assertEqual(self.at.info[0].value, "Word \"zebra\" already exists in dictionary.")
        self.assertEqual(self.at.session_state["index"].count(), 50)

    def test_add_word_rejects_blank_and_letterless(self):
        self.at.sidebar.selectbox[0].select("Add Word").run()
        self.submit_word("   ")
        self.assertEqual(self.at.error[0].value, "❌ Cannot add empty word. Please try again.")

        self.submit_word("123")
        self.assertEqual(self.at.error[0].value,
                         "❌ Cannot add \"123\": word must contain at least one letter (a-z).")
        self.assertEqual(len(self.at.info), 0)
        self.assertEqual(self.at.session_state["index"].count(), 49)

    def test_reset_restores_seed_dictionary(self):
        self.at.sidebar.selectbox[0].select("Add Word").run()
        self.submit_word("zebra")
        self.assertEqual(self.at.session_state["index"].count(), 50)

        self.at.sidebar.button[0].click().run()
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.session_state["index"].count(), 49)
        self.assertNotIn("zebra", self.at.session_state["index"])


if __name__ == "__main__":
    unittest.main(verbosity=2)

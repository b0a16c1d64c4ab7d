import unittest

from src.second_brain.core.errors import FormatError
from src.second_brain.normalizer.service import classify_payload, is_present, normalize
from src.second_brain.normalizer.shapes import BareText, DirectAnswer, NestedAnswer, ResponseText


class CascadeTests(unittest.TestCase):
    def test_direct_answer(self):
        self.assertEqual(normalize({"answer": "X"}), "X")

    def test_nested_answer(self):
        self.assertEqual(normalize({"response": {"answer": "Y"}}), "Y")

    def test_response_text(self):
        self.assertEqual(normalize({"response": "Z"}), "Z")

    def test_bare_string_payload(self):
        self.assertEqual(normalize("W"), "W")

    def test_direct_answer_beats_nested_answer(self):
        self.assertEqual(normalize({"answer": "X", "response": {"answer": "Y"}}), "X")

    def test_empty_direct_answer_falls_through_to_nested_answer(self):
        self.assertEqual(normalize({"answer": "", "response": {"answer": "Y"}}), "Y")

    def test_unknown_object_is_format_error(self):
        with self.assertRaises(FormatError) as ctx:
            normalize({"foo": "bar"})
        self.assertEqual(str(ctx.exception), "Unexpected response format from API")

    def test_falsy_answer_falls_through_to_response_text(self):
        self.assertEqual(normalize({"answer": 0, "response": "Z"}), "Z")
        self.assertEqual(normalize({"answer": None, "response": "Z"}), "Z")
        self.assertEqual(normalize({"answer": False, "response": "Z"}), "Z")

    def test_nested_object_without_answer_is_format_error(self):
        with self.assertRaises(FormatError):
            normalize({"response": {"text": "nope"}})

    def test_empty_response_text_is_format_error(self):
        with self.assertRaises(FormatError):
            normalize({"response": ""})

    def test_non_object_payloads_are_format_errors(self):
        for payload in (None, 42, 0, True, [], ["answer"], ""):
            with self.subTest(payload=payload):
                with self.assertRaises(FormatError):
                    normalize(payload)

    def test_nested_answer_inside_list_response_is_not_accepted(self):
        with self.assertRaises(FormatError):
            normalize({"response": [{"answer": "Y"}]})


class ShapeClassificationTests(unittest.TestCase):
    def test_each_shape_is_tagged(self):
        self.assertEqual(classify_payload({"answer": "X"}), DirectAnswer(value="X"))
        self.assertEqual(classify_payload({"response": {"answer": "Y"}}), NestedAnswer(value="Y"))
        self.assertEqual(classify_payload({"response": "Z"}), ResponseText(text="Z"))
        self.assertEqual(classify_payload("W"), BareText(text="W"))

    def test_kind_discriminators(self):
        self.assertEqual(classify_payload({"answer": "X"}).kind, "direct_answer")
        self.assertEqual(classify_payload("W").kind, "bare_text")

    def test_presence_rule(self):
        self.assertFalse(is_present(None))
        self.assertFalse(is_present(""))
        self.assertFalse(is_present(0))
        self.assertFalse(is_present(0.0))
        self.assertFalse(is_present(False))
        self.assertTrue(is_present([]))
        self.assertTrue(is_present({}))
        self.assertTrue(is_present(True))
        self.assertTrue(is_present(" "))


class NonStringAnswerPolicyTests(unittest.TestCase):
    def test_lenient_mode_renders_json_text(self):
        self.assertEqual(normalize({"answer": 42}), "42")
        self.assertEqual(normalize({"answer": True}), "true")
        self.assertEqual(normalize({"answer": ["a", "b"]}), '["a", "b"]')
        self.assertEqual(normalize({"response": {"answer": {"text": "café"}}}), '{"text": "café"}')

    def test_empty_list_answer_is_present(self):
        self.assertEqual(normalize({"answer": [], "response": "Z"}), "[]")

    def test_strict_mode_rejects_non_string_answers(self):
        with self.assertRaises(FormatError):
            normalize({"answer": 42}, strict_strings=True)
        with self.assertRaises(FormatError):
            normalize({"response": {"answer": ["a"]}}, strict_strings=True)

    def test_strict_mode_accepts_strings(self):
        self.assertEqual(normalize({"answer": "X"}, strict_strings=True), "X")
        self.assertEqual(normalize("W", strict_strings=True), "W")


if __name__ == "__main__":
    unittest.main()

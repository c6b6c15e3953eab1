import unittest

from themekit.services.content_filters import FilterRegistry


class FilterRegistryTests(unittest.TestCase):
    def test_callbacks_run_by_priority_then_subscription_order(self):
        registry = FilterRegistry()
        registry.subscribe("the_content", "late", lambda v: v + "[late]", 20)
        registry.subscribe("the_content", "first", lambda v: v + "[first]", 10)
        registry.subscribe("the_content", "second", lambda v: v + "[second]", 10)
        self.assertEqual(registry.apply("the_content", "x"), "x[first][second][late]")

    def test_unsubscribe_requires_matching_priority(self):
        registry = FilterRegistry()
        registry.subscribe("the_content", "sharing_display", lambda v: v + "[share]", 19)
        self.assertFalse(registry.unsubscribe("the_content", "sharing_display", 10))
        self.assertEqual(registry.apply("the_content", "x"), "x[share]")
        self.assertTrue(registry.unsubscribe("the_content", "sharing_display", 19))
        self.assertEqual(registry.apply("the_content", "x"), "x")
        self.assertFalse(registry.unsubscribe("the_content", "sharing_display", 19))

    def test_callback_removed_mid_chain_is_skipped(self):
        registry = FilterRegistry()
        registry.subscribe("the_content", "sharing_display", lambda v: v + "[share]", 19)
        registry.subscribe(
            "the_content",
            "remover",
            lambda v: registry.unsubscribe("the_content", "sharing_display", 19) and v,
            10,
        )
        self.assertEqual(registry.apply("the_content", "body"), "body")

    def test_unknown_event_returns_value(self):
        self.assertEqual(FilterRegistry().apply("the_title", "t"), "t")


if __name__ == "__main__":
    unittest.main()

import unittest

from reflectkit import MethodNotFoundError, invoke
from reflectkit.domain import MethodInvoker
from tests.models import Counter, SubCounter


class MethodInvokerTests(unittest.TestCase):
    def setUp(self):
        self.invoker = MethodInvoker()
        self.counter = Counter(limit=4, label="main")

    def test_invokes_public_method(self):
        self.assertEqual(self.invoker.invoke(self.counter, "describe"), "main/4")

    def test_invokes_private_method_declared_on_class(self):
        self.assertEqual(self.invoker.invoke(self.counter, "__secret"), "secret:main")

    def test_invokes_protected_method(self):
        self.assertEqual(self.invoker.invoke(self.counter, "_internal"), "internal")

    def test_invokes_static_and_class_methods(self):
        self.assertEqual(self.invoker.invoke(self.counter, "version"), 2)
        self.assertEqual(self.invoker.invoke(self.counter, "kind"), "Counter")

    def test_falls_back_to_inherited_methods(self):
        sub = SubCounter(limit=1, label="sub")

        self.assertEqual(self.invoker.invoke(sub, "own"), "own")
        self.assertEqual(self.invoker.invoke(sub, "describe"), "sub/1")
        self.assertEqual(self.invoker.invoke(sub, "kind"), "SubCounter")

    def test_private_method_of_base_class_is_not_reachable(self):
        sub = SubCounter(limit=1, label="sub")

        with self.assertRaises(MethodNotFoundError):
            self.invoker.invoke(sub, "__secret")

    def test_methods_requiring_arguments_are_skipped(self):
        with self.assertRaises(MethodNotFoundError):
            self.invoker.invoke(self.counter, "add")

    def test_properties_and_fields_are_not_methods(self):
        with self.assertRaises(MethodNotFoundError):
            self.invoker.invoke(self.counter, "doubled")
        with self.assertRaises(MethodNotFoundError):
            self.invoker.invoke(self.counter, "label")

    def test_missing_method_names_type_and_method(self):
        with self.assertRaises(MethodNotFoundError) as ctx:
            self.invoker.invoke(self.counter, "vanish")

        self.assertEqual(str(ctx.exception), "Method not found: Counter.vanish")
        self.assertEqual(ctx.exception.type_name, "Counter")
        self.assertEqual(ctx.exception.method_name, "vanish")

    def test_method_exceptions_propagate_unwrapped(self):
        with self.assertRaisesRegex(ValueError, "boom"):
            self.invoker.invoke(self.counter, "explode")

    def test_builtin_methods_through_mro(self):
        self.assertEqual(self.invoker.invoke([3, 1, 2], "copy"), [3, 1, 2])
        self.assertIsInstance(self.invoker.invoke(self.counter, "__repr__"), str)

    def test_module_level_invoke(self):
        self.assertEqual(invoke(self.counter, "describe"), "main/4")


if __name__ == "__main__":
    unittest.main()

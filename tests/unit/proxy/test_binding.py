"""Unit tests for ProxyBinding and wrap."""

import pytest

from src.proxy import InterceptionPolicy, ProxyBinding, passthrough_policy, wrap


class TestPassthrough:
    """Tests for bindings without hooks."""

    def test_get_returns_raw_value(self, person):
        """Test reads without on_get return the target value."""
        binding = wrap(person)
        assert binding.get("name") == "John Doe"
        assert binding.get("age") == 42

    def test_get_missing_key_raises(self, person):
        """Test reads of missing keys behave like the mapping."""
        binding = wrap(person, passthrough_policy())
        with pytest.raises(KeyError):
            binding.get("nonExistentProperty")

    def test_set_writes_unconditionally(self, person):
        """Test writes without on_set reach the target."""
        binding = wrap(person)
        assert binding.set("age", "not a number") is None
        assert person["age"] == "not a number"

    def test_binding_does_not_copy_target(self, person):
        """Test the binding mediates the caller's own mapping."""
        binding = wrap(person)
        person["age"] = 50
        assert binding.get("age") == 50
        assert binding.target is person


class TestHooks:
    """Tests for custom interception hooks."""

    def test_on_get_result_is_surfaced(self, person):
        """Test on_get replaces the read result."""
        policy = InterceptionPolicy(on_get=lambda target, key: f"<{target[key]}>")
        assert wrap(person, policy).get("name") == "<John Doe>"

    def test_on_get_receives_target_and_key(self, person):
        """Test on_get is called with (target, key)."""
        calls = []

        def on_get(target, key):
            calls.append((target, key))

        wrap(person, InterceptionPolicy(on_get=on_get)).get("age")

        assert calls == [(person, "age")]

    def test_on_set_controls_write(self, person):
        """Test on_set decides whether the target changes."""
        policy = InterceptionPolicy(on_set=lambda target, key, value: "blocked")
        binding = wrap(person, policy)

        assert binding.set("age", 99) == "blocked"
        assert person["age"] == 42

    def test_on_set_may_transform(self, person):
        """Test on_set can apply a modified value."""

        def upper(target, key, value):
            target[key] = value.upper()

        wrap(person, InterceptionPolicy(on_set=upper)).set("name", "thanos")
        assert person["name"] == "THANOS"

    def test_only_set_hook_leaves_reads_raw(self, person):
        """Test a policy with only on_set still reads the target directly."""
        policy = InterceptionPolicy(on_set=lambda target, key, value: None)
        assert wrap(person, policy).get("name") == "John Doe"

    def test_only_get_hook_leaves_writes_raw(self, person):
        """Test a policy with only on_get still writes directly."""
        policy = InterceptionPolicy(on_get=lambda target, key: None)
        wrap(person, policy).set("age", 1)
        assert person["age"] == 1


class TestProxyBinding:
    """Tests for ProxyBinding basics."""

    def test_default_policy_is_passthrough(self, person):
        """Test a binding without policy gets a hookless one."""
        binding = ProxyBinding(person)
        assert binding.policy.on_get is None
        assert binding.policy.on_set is None
        assert binding.policy.name == "passthrough"

    def test_repr(self, person):
        """Test repr shows policy name and keys."""
        binding = wrap(person)
        assert "passthrough" in repr(binding)
        assert "'name'" in repr(binding)

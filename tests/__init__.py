import pytest

# pytest only rewrites asserts in modules it collects tests from; the helpers
# in tests.utils (e.g. assert_close) need to opt in explicitly.
pytest.register_assert_rewrite("tests.utils")

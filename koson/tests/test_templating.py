from pathlib import Path

import jinja2
import pytest

from koson import InvalidValueTypeError, KosonConfig, empty_array, new_object_builder
from koson.templating import create_environment, koson_filter, render_template


class TestKosonFilter:
    def test_scalars(self):
        assert koson_filter(None) == "null"
        assert koson_filter('a"b') == r'"a\"b"'
        assert koson_filter(1.5) == "1.5"

    def test_finished_values(self):
        value = new_object_builder().key("a", empty_array()).finish()
        assert koson_filter(value) == '{"a":[]}'

    def test_rejects_unclassifiable_values(self):
        with pytest.raises(InvalidValueTypeError):
            koson_filter([1, 2])


class TestEnvironment:
    def test_filter_is_registered(self):
        env = create_environment()
        assert "koson" in env.filters
        assert env.from_string("{{ x | koson }}").render(x=True) == "true"

    def test_undefined_variables_raise(self):
        with pytest.raises(jinja2.UndefinedError):
            render_template("{{ nope | koson }}", {})

    def test_trailing_newline_is_kept(self):
        assert render_template("{{ x | koson }}\n", {"x": 1}) == "1\n"

    def test_config_reaches_the_filter(self):
        config = KosonConfig(stringify_unknown=False)
        with pytest.raises(InvalidValueTypeError):
            render_template("{{ p | koson }}", {"p": Path("a")}, config)
        assert render_template("{{ p | koson }}", {"p": Path("a")}) == '"a"'

    def test_loader(self):
        data_dir = Path(__file__).parent / "test_data"
        env = create_environment(jinja2.FileSystemLoader(str(data_dir)))
        body = new_object_builder().key("id", 7).finish()
        out = env.get_template("request.json.j2").render(name="koson", body=body)
        assert out == '{"name": "koson", "body": {"id":7}}\n'

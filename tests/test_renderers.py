from concurrent.futures import ThreadPoolExecutor

import pytest

from universal_box.config import RenderTarget
from universal_box.design_system.renderers import (
    DocumentStyleRenderer,
    NativeStyle,
    NativeStyleRenderer,
    create_renderer,
    merge_styles,
    render_style,
    to_css_property,
    to_css_value,
)
from universal_box.exceptions import UnsupportedRenderTargetError


class TestMergeStyles:
    def test_without_override_copies_computed(self, eight_point_theme):
        computed = {"flexDirection": "column"}

        merged = merge_styles(computed, eight_point_theme)

        assert merged == computed
        assert merged is not computed

    def test_override_wins_key_for_key(self, eight_point_theme):
        merged = merge_styles(
            {"flexDirection": "column", "paddingTop": 8},
            eight_point_theme,
            lambda theme: {"paddingTop": 0, "color": theme.colors["brand"]},
        )

        assert merged == {"flexDirection": "column", "paddingTop": 0, "color": "#123456"}

    def test_override_returning_none_is_ignored(self, eight_point_theme):
        merged = merge_styles({"opacity": 1}, eight_point_theme, lambda theme: None)

        assert merged == {"opacity": 1}


class TestCssFormatting:
    def test_property_names_are_kebab_case(self):
        assert to_css_property("paddingLeft") == "padding-left"
        assert to_css_property("flexDirection") == "flex-direction"
        assert to_css_property("zIndex") == "z-index"
        assert to_css_property("top") == "top"

    def test_lengths_get_px(self):
        assert to_css_value("paddingLeft", 16) == "16px"
        assert to_css_value("width", 12.5) == "12.5px"
        assert to_css_value("width", 24.0) == "24px"

    def test_unitless_numbers_and_zero(self):
        assert to_css_value("flexGrow", 1) == "1"
        assert to_css_value("opacity", 0.5) == "0.5"
        assert to_css_value("zIndex", 10) == "10"
        assert to_css_value("margin", 0) == "0"

    def test_strings_are_untouched(self):
        assert to_css_value("width", "100%") == "100%"

    def test_large_numbers_stay_in_plain_notation(self):
        assert to_css_value("zIndex", 1000000) == "1000000"
        assert to_css_value("width", 1234567) == "1234567px"
        assert to_css_value("width", 1e7) == "10000000px"

    def test_fractions_keep_full_precision(self):
        assert to_css_value("opacity", 0.1234567) == "0.1234567"
        assert to_css_value("width", 0.0000001) == "0.0000001px"

    def test_close_widths_get_distinct_rules(self, document_renderer):
        document_renderer.render_rule({"width": 1234567})
        document_renderer.render_rule({"width": 1234568})

        assert document_renderer.render_to_string() == (
            ".a{width:1234567px}.b{width:1234568px}"
        )


class TestDocumentStyleRenderer:
    def test_returns_atomic_class_names(self, document_renderer):
        class_name = document_renderer.render_rule(
            {"flexDirection": "column", "display": "flex"}
        )

        assert class_name == "a b"
        assert document_renderer.render_to_string() == (
            ".a{display:flex}.b{flex-direction:column}"
        )

    def test_identical_styles_share_class_names(self, document_renderer):
        first = document_renderer.render_rule({"display": "flex", "paddingTop": 8})
        second = document_renderer.render_rule({"paddingTop": 8, "display": "flex"})

        assert first == second
        assert document_renderer.registered_count == 2

    def test_declarations_are_shared_between_styles(self, document_renderer):
        document_renderer.render_rule({"display": "flex", "paddingTop": 8})
        class_name = document_renderer.render_rule({"display": "flex", "paddingTop": 16})

        assert class_name == "a c"
        assert document_renderer.registered_count == 3

    def test_none_values_are_dropped(self, document_renderer):
        class_name = document_renderer.render_rule(
            {"display": "flex", "backgroundColor": None}
        )

        assert class_name == "a"
        assert "background" not in document_renderer.render_to_string()

    def test_clear_resets_the_cache(self, document_renderer):
        document_renderer.render_rule({"display": "flex"})

        document_renderer.clear()

        assert document_renderer.registered_count == 0
        assert document_renderer.render_to_string() == ""

    def test_style_prop(self):
        assert DocumentStyleRenderer.style_prop == "className"
        assert DocumentStyleRenderer.target == RenderTarget.DOCUMENT


class TestNativeStyleRenderer:
    def test_returns_style_record(self, native_renderer):
        record = native_renderer.render_rule({"flexDirection": "column"})

        assert isinstance(record, NativeStyle)
        assert record.id == 1
        assert dict(record.style) == {"flexDirection": "column"}

    def test_identical_styles_return_same_record(self, native_renderer):
        first = native_renderer.render_rule({"position": "relative", "paddingTop": 8})
        second = native_renderer.render_rule({"paddingTop": 8, "position": "relative"})

        assert first is second
        assert native_renderer.registered_count == 1

    def test_different_styles_get_new_ids(self, native_renderer):
        first = native_renderer.render_rule({"paddingTop": 8})
        second = native_renderer.render_rule({"paddingTop": 16})

        assert (first.id, second.id) == (1, 2)
        assert first != second

    def test_records_are_read_only(self, native_renderer):
        record = native_renderer.render_rule({"paddingTop": 8})

        with pytest.raises(TypeError):
            record.style["paddingTop"] = 0  # type: ignore[index]

    def test_none_values_are_dropped(self, native_renderer):
        record = native_renderer.render_rule({"opacity": 1, "backgroundColor": None})

        assert dict(record.style) == {"opacity": 1}
        assert record is native_renderer.render_rule({"opacity": 1})

    def test_nested_values_are_supported(self, native_renderer):
        style = {"transform": [{"rotate": "45deg"}], "shadowOffset": {"width": 0, "height": 2}}

        assert native_renderer.render_rule(style) is native_renderer.render_rule(dict(style))

    def test_nested_values_are_copied(self, native_renderer):
        offset = {"width": 0, "height": 2}
        transform = [{"rotate": "45deg"}]
        record = native_renderer.render_rule({"shadowOffset": offset, "transform": transform})

        offset["height"] = 10
        transform.append({"scale": 2})

        assert record.style["shadowOffset"]["height"] == 2
        assert len(record.style["transform"]) == 1
        with pytest.raises(TypeError):
            record.style["shadowOffset"]["height"] = 4  # type: ignore[index]
        assert record is native_renderer.render_rule(
            {"shadowOffset": {"width": 0, "height": 2}, "transform": [{"rotate": "45deg"}]}
        )

    def test_style_prop(self):
        assert NativeStyleRenderer.style_prop == "style"
        assert NativeStyleRenderer.target == RenderTarget.NATIVE


class TestConcurrentRegistration:
    @pytest.mark.parametrize("target", list(RenderTarget))
    def test_same_shape_yields_one_identifier(self, target):
        renderer = create_renderer(target)
        style = {"display": "flex", "paddingLeft": 16, "paddingRight": 16, "flexGrow": 1}

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: renderer.render_rule(dict(style)), range(64)))

        assert all(result == results[0] for result in results)
        expected = len(style) if target == RenderTarget.DOCUMENT else 1
        assert renderer.registered_count == expected


class TestCreateRenderer:
    def test_document(self):
        assert isinstance(create_renderer(RenderTarget.DOCUMENT), DocumentStyleRenderer)

    def test_native_from_string(self):
        assert isinstance(create_renderer("native"), NativeStyleRenderer)

    def test_unknown_target_raises(self):
        with pytest.raises(UnsupportedRenderTargetError) as exc_info:
            create_renderer("terminal")

        assert exc_info.value.error_code == "UNSUPPORTED_RENDER_TARGET"

    def test_each_call_builds_a_fresh_cache(self):
        assert create_renderer("native") is not create_renderer("native")


class TestRenderStyle:
    def test_same_inputs_same_identifier(self, eight_point_theme, document_renderer):
        computed = {"display": "flex", "paddingTop": 8}

        first = render_style(document_renderer, eight_point_theme, computed)
        second = render_style(document_renderer, eight_point_theme, dict(computed))

        assert first == second

    def test_override_is_applied_last(self, eight_point_theme, native_renderer):
        record = render_style(
            native_renderer,
            eight_point_theme,
            {"paddingTop": 8, "position": "relative"},
            lambda theme: {"position": "absolute"},
        )

        assert dict(record.style) == {"paddingTop": 8, "position": "absolute"}

from portfolio.utils.html import css_property, css_url, sanitize_html, style_attr


def test_sanitize_keeps_allowed_tags():
    assert str(sanitize_html("<p>Hi <em>there</em></p>")) == "<p>Hi <em>there</em></p>"


def test_sanitize_strips_scripts_and_handlers():
    out = str(sanitize_html('<a href="https://x.dev" onclick="steal()">x</a><script>alert(1)</script>'))

    assert "onclick" not in out
    assert "script" not in out
    assert 'href="https://x.dev"' in out


def test_sanitize_empty():
    assert str(sanitize_html(None)) == ""


def test_css_property_kebab_case():
    assert css_property("backgroundColor") == "background-color"
    assert css_property("font-size") == "font-size"


def test_style_attr_drops_unsafe_values():
    style = {"color": "red", "backgroundImage": "url(javascript:x)", "width": "1px; height: 0", "margin": None}

    assert str(style_attr(style)) == "color: red"


def test_style_attr_escapes_quotes():
    assert str(style_attr({"fontFamily": '"Inter"'})) == "font-family: &#34;Inter&#34;"


def test_css_url_only_allows_https_and_relative():
    assert str(css_url("https://img.dev/a.png")) == "url(&#39;https://img.dev/a.png&#39;)"
    assert str(css_url("/static/a.png")) == "url(&#39;/static/a.png&#39;)"
    assert str(css_url("javascript:alert(1)")) == ""
    assert str(css_url("https://x.dev/a.png') ; x")) == ""

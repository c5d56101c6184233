"""Генерация embed-сниппета."""
import json
import re

from editorcraft.domains.editors.embed import (
    EMBED_CONTAINER_ID, generate_embed_code, serialize_config
)

SCRIPT_URL = "https://cdn.example.com/editorcraft-embed.js"

CONFIG_LITERAL_RE = re.compile(r"config: (.+)\n")


def embedded_config(embed_code: str) -> dict:
    match = CONFIG_LITERAL_RE.search(embed_code)
    assert match is not None
    return json.loads(match.group(1))


def test_snippet_structure():
    embed_code = generate_embed_code({"theme": "dark"}, SCRIPT_URL)

    assert f'<script src="{SCRIPT_URL}"></script>' in embed_code
    assert f'<div id="{EMBED_CONTAINER_ID}"></div>' in embed_code
    assert "EditorCraft.init({" in embed_code
    assert f"containerId: '{EMBED_CONTAINER_ID}'" in embed_code


def test_config_literal_parses_back():
    config = {"theme": "dark", "fontSize": 18, "features": {"bold": True, "tables": False}}

    assert embedded_config(generate_embed_code(config, SCRIPT_URL)) == config


def test_deterministic_regardless_of_key_order():
    first = generate_embed_code({"theme": "dark", "fontSize": 18}, SCRIPT_URL)
    second = generate_embed_code({"fontSize": 18, "theme": "dark"}, SCRIPT_URL)

    assert first == second


def test_script_breaking_characters_escaped():
    config = {"theme": "</script><script>alert('x')</script>", "note": "a & b\u2028c"}
    embed_code = generate_embed_code(config, SCRIPT_URL)

    # единственный закрывающий тег в сниппете - собственный
    assert embed_code.count("</script>") == 2
    assert "alert('x')" not in embed_code
    assert "\u2028" not in embed_code
    assert "\\u2028" in embed_code
    assert "\\u0026" in embed_code
    assert embedded_config(embed_code) == config


def test_non_ascii_kept_readable():
    assert serialize_config({"theme": "тёмная"}) == '{"theme": "тёмная"}'


def test_script_url_attribute_escaped():
    embed_code = generate_embed_code({}, 'https://x.test/a.js"><script>')

    assert '"><script>' not in embed_code
    assert "&quot;&gt;&lt;script&gt;" in embed_code

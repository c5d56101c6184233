"""Генерация embed-сниппета для сторонних страниц.

Сниппет подключает скрипт редактора, объявляет контейнер и вызывает
``EditorCraft.init`` с копией конфигурации. Конфигурация вставляется как
JSON-литерал внутри <script>, поэтому символы, способные закрыть тег или
сломать строку, заменяются на \\uXXXX-последовательности: результат остается
валидным JSON и валидным JS.
"""
import html
import json
from typing import Any, Dict

EMBED_CONTAINER_ID = "editorcraft-container"

_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "'": "\\u0027",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

EMBED_TEMPLATE = """
<script src="{script_url}"></script>
<div id="{container_id}"></div>
<script>
  EditorCraft.init({{
    containerId: '{container_id}',
    config: {config}
  }});
</script>"""


def serialize_config(config_data: Dict[str, Any]) -> str:
    """JSON-литерал конфигурации, безопасный для вставки в <script>"""
    literal = json.dumps(config_data, sort_keys=True, ensure_ascii=False)
    for char, escaped in _SCRIPT_UNSAFE.items():
        literal = literal.replace(char, escaped)
    return literal


def generate_embed_code(config_data: Dict[str, Any], script_url: str) -> str:
    """Детерминированная функция от config_data (при фиксированном адресе скрипта)"""
    return EMBED_TEMPLATE.format(
        script_url=html.escape(script_url, quote=True),
        container_id=EMBED_CONTAINER_ID,
        config=serialize_config(config_data),
    )

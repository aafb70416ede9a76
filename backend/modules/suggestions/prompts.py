"""
Prompt templates and sampling settings for the completion model.

Prompts are in Brazilian Portuguese: item names, categories and messages
are all pt-BR.
"""

CATEGORIES: tuple[str, ...] = (
    "Hortifruti",
    "Laticínios",
    "Padaria",
    "Carnes",
    "Limpeza",
    "Higiene",
    "Bebidas",
    "Outros",
)
DEFAULT_CATEGORY = "Outros"

# Near-deterministic for classification, more varied for open-ended generation.
SMART_LIST_TEMPERATURE = 0.7
WEEKLY_TEMPERATURE = 0.5
AUTOCOMPLETE_TEMPERATURE = 0.3
CATEGORIZE_TEMPERATURE = 0.1

MAX_SUGGESTIONS = 8
HISTORY_SEARCH_LIMIT = 20
HISTORY_ENOUGH = 5
WEEKLY_HISTORY_LIMIT = 10
MAX_WEEKLY_SUGGESTIONS = 5

SMART_LIST_PROMPT = """Você é um assistente especializado em listas de compras brasileiras.
{dietary_info}
Crie uma lista de compras baseada no pedido do usuário.
Responda APENAS com um JSON válido no formato:
{{
  "title": "Título da lista",
  "description": "Descrição opcional",
  "items": [
    {{
      "name": "Nome do item",
      "quantity": "Quantidade (opcional)",
      "category": "Categoria ({categories})"
    }}
  ]
}}

Use nomes de produtos brasileiros e quantidades realistas."""

AUTOCOMPLETE_PROMPT = """Você é um assistente de lista de compras brasileiro.
Sugira itens de supermercado que começam com ou são relacionados ao texto fornecido.
Responda APENAS com um array JSON de strings com nomes de produtos brasileiros.
Máximo {limit} sugestões. Exemplo: ["Leite integral", "Leite desnatado", "Leite condensado"]"""

CATEGORIZE_PROMPT = """Categorize o item de supermercado brasileiro fornecido em uma das seguintes categorias:
{category_lines}

Responda APENAS com o nome da categoria."""

WEEKLY_PROMPT = """Baseado no histórico de compras do usuário, sugira itens que ele pode ter esquecido de comprar esta semana.
Considere itens básicos e essenciais para uma casa brasileira.
Responda com um JSON no formato:
{{
  "suggestions": [
    {{
      "name": "Nome do item",
      "reason": "Motivo da sugestão",
      "category": "Categoria"
    }}
  ]
}}
Máximo {limit} sugestões."""


def smart_list_prompt(dietary_preferences: list[str]) -> str:
    dietary_info = ""
    if dietary_preferences:
        dietary_info = f"Preferências alimentares: {', '.join(dietary_preferences)}. "
    return SMART_LIST_PROMPT.format(
        dietary_info=dietary_info,
        categories=", ".join(CATEGORIES),
    )


def autocomplete_prompt() -> str:
    return AUTOCOMPLETE_PROMPT.format(limit=MAX_SUGGESTIONS)


def categorize_prompt() -> str:
    return CATEGORIZE_PROMPT.format(
        category_lines="\n".join(f"- {category}" for category in CATEGORIES)
    )


def weekly_prompt() -> str:
    return WEEKLY_PROMPT.format(limit=MAX_WEEKLY_SUGGESTIONS)


def weekly_history_message(item_names: list[str]) -> str:
    return f"Histórico de itens frequentes: {', '.join(item_names)}"

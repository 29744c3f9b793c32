from pathlib import Path
from typing import Any, Dict
import yaml
from jinja2 import Environment, StrictUndefined

from .arn import Arn


env = Environment(undefined=StrictUndefined)


def load_template(path: str | Path) -> Dict[str, Any]:
    content = Path(path).read_text(encoding="utf-8")
    # Suporta YAML e JSON (YAML já é superset)
    data = yaml.safe_load(content) or {}
    if not isinstance(data, dict) or "format" not in data:
        raise ValueError(f"Template sem a chave 'format': {path}")
    return data


def render_arn(arn: Arn, expr: str) -> str:
    """
    Renderiza uma expressão Jinja2 usando os campos do ARN como contexto:

        "{{ service }}/{{ resource }}"  ->  "s3/my_bucket"

    Campos ausentes (region/account_id) chegam como None.
    Variáveis desconhecidas levantam erro (StrictUndefined).
    """
    template_obj = env.from_string(expr)
    return template_obj.render(**arn.to_dict())

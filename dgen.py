r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema driven record generation as an unbounded ranqy source.

    people = from_schema({'name': 'name', 'age': ('pyint', {'max_value': 90})}, seed=1)
    people.take(10).to.list()
'''

import numpy as np
from faker import Faker
from ranqy import generate, View
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'") from None
        return method(**(kwargs or {}))

    def _provide(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            return config["format"].format(value) if "format" in config else value

        if provider == "choice":
            # numpy hands back numpy scalars; records should hold python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._provide(schema, current_context)
            # fields see the parent context and the fields generated before them
            record = {}
            for k, v in schema.items():
                record[k] = self.create(v, {**current_context, **record})
            return record

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._count(item_schema)
            actual_item_schema = item_schema.get('_qen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._call_faker(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema

    def _count(self, item_schema: Any) -> int:
        count_config = item_schema.get("_qen_count", 5) if isinstance(item_schema, dict) else 5
        if isinstance(count_config, (list, tuple)) and len(count_config) == 2:
            low, high = count_config
            return int(self._rng.integers(low, high, endpoint=True))
        return int(count_config)


def from_schema(schema: Any, seed: Optional[int] = None) -> View:
    """
    an unbounded view of records built from `schema`. bound it with take()
    or take_while() before materializing. records are produced only as they
    are pulled.
    """
    generator = Generator(seed)
    return generate(lambda: generator.create(schema))

r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven fake records, served as an endless lazy source.

    people = records({'name': 'first_name', 'age': ('pyint', {'min_value': 18})}, seed=7)
    pipe(people, take(10), into_list)
'''

from typing import Any, Dict, Iterator, Optional

import numpy as np
from faker import Faker

PROVIDER_KEY = "_qen_provider"


class Generator:
    """interprets a schema into one record per create() call."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config[PROVIDER_KEY]
        if provider == "choice":
            picked = self._rng.choice(config["from"])
            # numpy scalars back to plain python values
            return picked.item() if hasattr(picked, 'item') else picked
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return context[key]
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown {PROVIDER_KEY}: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if PROVIDER_KEY in schema:
                return self._resolve_provider(schema, context)
            record = {}
            for key, field_schema in schema.items():
                # earlier fields of the same record are visible to refs
                record[key] = self.create(field_schema, {**context, **record})
            return record

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        return schema


def records(schema: Any, seed: Optional[int] = None) -> Iterator[Any]:
    """an infinite iterator of records built from schema; bound it with take()."""
    generator = Generator(seed)
    while True:
        yield generator.create(schema)

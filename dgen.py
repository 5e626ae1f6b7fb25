r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from seqops import from_iterable, once, generate, Enumerable
from typing import Any, Dict, Optional, Iterator


class Generator:
    """schema interpreter producing flat records for test data."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, record: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "ref":
            key = config["key"]
            if key not in record:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return record[key]

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        for key, field in schema.items():
            if isinstance(field, dict):
                record[key] = self._resolve_provider(field, record)
            elif isinstance(field, tuple) and len(field) == 2 and isinstance(field[1], dict):
                record[key] = self._resolve_faker_method(field[0], field[1])
            elif isinstance(field, str) and hasattr(self._fake, field):
                record[key] = self._resolve_faker_method(field)
            else:
                # anything else is a literal
                record[key] = field
        return record


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def _records(self, count: int) -> Iterator[Dict[str, Any]]:
        # a fresh generator per call keeps replays identical
        generator = Generator(self._seed)
        for _ in range(count):
            yield generator.create(self._schema)

    def take(self, count: int) -> Enumerable:
        """a materialized, restartable batch of records"""
        return from_iterable(list(self._records(count)))

    def replay(self, count: int) -> Enumerable:
        """a lazy, restartable stream that regenerates the same records on every traversal"""
        return generate(lambda: self._records(count))

    def stream(self, count: int) -> Enumerable:
        """a lazy, single-pass stream of records"""
        return once(self._records(count))


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)

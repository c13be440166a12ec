'''
fake record generator for tests.

a schema is a dict of field -> rule, where a rule is one of:
  'faker_method'                         -> Faker().faker_method()
  ('faker_method', {kwargs})             -> Faker().faker_method(**kwargs)
  {'_provider': 'choice', 'from': [...]} -> a random pick
  {'_provider': 'ref', 'key': 'field'}   -> the value of an earlier field
  {'_provider': 'literal', 'value': x}   -> x
  a nested dict                          -> a nested record
anything else is taken literally.
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, Optional
from seqy import Sequence, over


class RecordGenerator:
    """turns a schema into records, reproducibly when seeded."""

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

    def _resolve_provider(self, config: Dict, record: Dict) -> Any:
        provider = config['_provider']
        if provider == 'choice':
            picked = self._rng.choice(config['from'])
            # numpy scalars back to plain python values
            return picked.item() if hasattr(picked, 'item') else picked
        if provider == 'ref':
            if config['key'] not in record:
                raise ValueError(f"field '{config['key']}' is not generated yet")
            return record[config['key']]
        if provider == 'literal':
            return config['value']
        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any, record: Optional[Dict] = None) -> Any:
        if isinstance(schema, dict):
            if '_provider' in schema:
                return self._resolve_provider(schema, record or {})
            generated = {}
            for key, rule in schema.items():
                generated[key] = self.create(rule, generated)
            return generated

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema


class _SchemaSource:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = RecordGenerator(seed)

    def take(self, count: int) -> Sequence[Dict]:
        """generate 'count' records up front, so every pass sees the same data"""
        return over([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaSource:
    return _SchemaSource(schema, seed)

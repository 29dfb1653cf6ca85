import asyncio

import pytest

from perfscore.components.metrics.first_meaningful_paint import METRIC_ID
from perfscore.contracts.artifacts import DEFAULT_PASS, Artifacts
from perfscore.registries.metrics import register_metric_provider, unregister_metric_provider
from perfscore.use_cases.facade import build_context


class FakeProvider:
    """Stands in for trace analysis: returns a fixed timing and counts calls."""

    def __init__(self, timing=2000.0, error=None, delay=0.0):
        self.timing = timing
        self.error = error
        self.delay = delay
        self.calls = 0

    async def __call__(self, data, context):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return {"timing": self.timing}


@pytest.fixture
def install_provider():
    installed = []

    def _install(provider=None, metric_id=METRIC_ID, **fake_kwargs):
        """Register `provider`, or a FakeProvider built from `fake_kwargs`."""
        if provider is None:
            provider = FakeProvider(**fake_kwargs)
        register_metric_provider(metric_id, provider, replace=True)
        installed.append(metric_id)
        return provider

    yield _install
    for metric_id in installed:
        unregister_metric_provider(metric_id)


@pytest.fixture
def make_artifacts():
    def _make(is_mobile=True):
        return Artifacts(
            traces={DEFAULT_PASS: {"traceEvents": []}},
            devtools_logs={DEFAULT_PASS: []},
            tested_as_mobile_device=is_mobile,
        )

    return _make


@pytest.fixture
def context():
    return build_context()

"""End-to-end tests for the First Meaningful Paint audit."""
import asyncio
import copy

import pytest

from perfscore.contracts.artifacts import Artifacts
from perfscore.contracts.results import AuditResult
from perfscore.core.errors import InvalidConfiguration, MissingArtifact, UpstreamComputationFailure
from perfscore.use_cases.facade import build_context, run_audit, run_audits


AUDIT_ID = 'first-meaningful-paint'


@pytest.mark.parametrize('is_mobile,timing,expected', [
    (True, 2000, 0.9),
    (True, 4000, 0.5),
    (None, 4000, 0.5),
    (False, 800, 0.9),
    (False, 1600, 0.5),
])
def test_scenarios(install_provider, make_artifacts, context, is_mobile, timing, expected):
    install_provider(timing=timing)
    report = asyncio.run(run_audit(AUDIT_ID, make_artifacts(is_mobile), context))
    assert report.score == pytest.approx(expected, abs=0.01)
    assert report.numeric_value == timing
    assert report.numeric_unit == 'millisecond'


def test_report_metadata(install_provider, make_artifacts, context):
    install_provider(timing=2000)
    report = asyncio.run(run_audit(AUDIT_ID, make_artifacts(), context))
    assert report.id == AUDIT_ID
    assert report.title == 'First Meaningful Paint'
    assert report.score_display_mode == 'numeric'
    assert report.display_value == '2.0\u00a0s'


def test_run_returns_audit_result(install_provider, make_artifacts, context):
    from perfscore.contracts.options import ScoreOptions
    from perfscore.use_cases.audits.first_meaningful_paint import run

    install_provider(timing=1600)
    result = asyncio.run(run(make_artifacts(False), context, ScoreOptions()))
    expected = AuditResult(score=0.5, numeric_value=1600, display_value='1.6\u00a0s')
    assert result.model_dump() == expected.model_dump()


def test_idempotent(install_provider, make_artifacts, context):
    provider = install_provider(timing=3100)
    artifacts = make_artifacts()
    first = asyncio.run(run_audit(AUDIT_ID, artifacts, context))
    second = asyncio.run(run_audit(AUDIT_ID, artifacts, context))
    assert first == second
    assert provider.calls == 1


def test_upstream_failure_rejects(install_provider, make_artifacts, context):
    install_provider(error=RuntimeError('NO_FMP'))
    with pytest.raises(UpstreamComputationFailure):
        asyncio.run(run_audit(AUDIT_ID, make_artifacts(), context))


def test_option_overrides_from_context(install_provider, make_artifacts):
    install_provider(timing=3000)
    context = build_context(options={AUDIT_ID: {'mobile': {'scorePODR': 1500, 'scoreMedian': 3000}}})
    report = asyncio.run(run_audit(AUDIT_ID, make_artifacts(), context))
    assert report.score == pytest.approx(0.5)


def test_invalid_override_rejected(install_provider, make_artifacts):
    provider = install_provider()
    context = build_context(options={AUDIT_ID: {'mobile': {'scorePODR': 5000}}})
    with pytest.raises(InvalidConfiguration):
        asyncio.run(run_audit(AUDIT_ID, make_artifacts(), context))
    assert provider.calls == 0


def test_missing_required_artifact(install_provider, context):
    install_provider()
    with pytest.raises(MissingArtifact) as info:
        asyncio.run(run_audit(AUDIT_ID, Artifacts(traces={'defaultPass': {}}), context))
    assert info.value.artifact == 'devtools_logs'


def test_accepts_mapping_artifacts(install_provider, context):
    install_provider(timing=800)
    artifacts = {
        'traces': {'defaultPass': {}},
        'devtoolsLogs': {'defaultPass': []},
        'TestedAsMobileDevice': False,
    }
    report = asyncio.run(run_audit(AUDIT_ID, artifacts, context))
    assert report.score == pytest.approx(0.9)


def test_concurrent_audits_share_one_computation(install_provider, make_artifacts, context):
    provider = install_provider(timing=2000, delay=0.01)
    artifacts = make_artifacts()

    async def scenario():
        return await asyncio.gather(*(run_audit(AUDIT_ID, artifacts, context) for _ in range(4)))

    reports = asyncio.run(scenario())
    assert len({r.score for r in reports}) == 1
    assert provider.calls == 1


def test_run_audits(install_provider, make_artifacts, context):
    install_provider(timing=4000)
    reports = asyncio.run(run_audits([AUDIT_ID], make_artifacts(), context))
    assert list(reports) == [AUDIT_ID]
    assert reports[AUDIT_ID].score == pytest.approx(0.5)


def test_cancelled_context_rejects(install_provider, make_artifacts, context):
    install_provider(delay=10)

    async def scenario():
        task = asyncio.ensure_future(run_audit(AUDIT_ID, make_artifacts(), context))
        await asyncio.sleep(0)
        context.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert context.cancelled


def test_malformed_artifacts_rejected(install_provider, context):
    provider = install_provider()
    artifacts = {
        'traces': {'defaultPass': {}},
        'devtoolsLogs': {'defaultPass': []},
        'TestedAsMobileDevice': 'desktop',
    }
    with pytest.raises(InvalidConfiguration):
        asyncio.run(run_audit(AUDIT_ID, artifacts, context))
    assert provider.calls == 0


def test_unreported_classification_scores_as_mobile(install_provider, context):
    install_provider(timing=4000)
    artifacts = Artifacts(traces={'defaultPass': {}}, devtools_logs={'defaultPass': []})
    report = asyncio.run(run_audit(AUDIT_ID, artifacts, context))
    assert report.score == pytest.approx(0.5)


def test_run_audits_propagates_failure(install_provider, make_artifacts, context):
    install_provider(error=RuntimeError('NO_FMP'))
    with pytest.raises(UpstreamComputationFailure):
        asyncio.run(run_audits([AUDIT_ID], make_artifacts(), context))


def test_inputs_not_mutated(install_provider, make_artifacts):
    install_provider(timing=3000)
    overrides = {AUDIT_ID: {'mobile': {'scorePODR': 1500, 'scoreMedian': 3000}}}
    context = build_context(options=overrides)
    artifacts = make_artifacts()
    artifacts_before = copy.deepcopy(artifacts.model_dump())
    options_before = copy.deepcopy(context.options)

    asyncio.run(run_audit(AUDIT_ID, artifacts, context))

    assert artifacts.model_dump() == artifacts_before
    assert context.options == options_before
    assert overrides == {AUDIT_ID: {'mobile': {'scorePODR': 1500, 'scoreMedian': 3000}}}

"""Tests for evaluation contexts built through the facade."""
import pytest

from perfscore.contracts.artifacts import Settings
from perfscore.core.errors import InvalidConfiguration
from perfscore.i18n import get_bundle
from perfscore.use_cases.facade import build_context, list_audits


def test_defaults():
    context = build_context()
    assert context.settings == Settings()
    assert context.bundle is get_bundle('en-US')
    assert context.options_for('first-meaningful-paint') is None
    assert len(context.cache) == 0
    assert not context.cancelled


def test_contexts_are_independent():
    a, b = build_context(), build_context()
    assert a.context_id != b.context_id
    assert a.cache is not b.cache


def test_unknown_locale_uses_default_bundle():
    context = build_context(settings={'locale': 'fr-FR'})
    assert context.settings.locale == 'fr-FR'
    assert context.bundle.locale == 'en-US'


def test_explicit_bundle_wins():
    bundle = get_bundle().with_messages({'common.seconds': '{timeInMs:seconds} sec'})
    assert build_context(bundle=bundle).bundle is bundle


def test_settings_validated():
    with pytest.raises(InvalidConfiguration):
        build_context(settings={'throttling_method': 'warp'})
    with pytest.raises(InvalidConfiguration):
        build_context(settings={'colour': 'blue'})


def test_list_audits():
    assert list_audits() == ['first-meaningful-paint']

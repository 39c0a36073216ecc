from __future__ import annotations

from typing import Optional

from config.settings import Settings
from errors import ConfigurationError
from pipelines.runner import Pipeline, PipelineState, RunContext
from pipelines.steps import (
    AggregateProfile,
    AuthenticateSession,
    ExtractProfile,
    FollowSecondaryLinks,
    LoadIdentity,
    ParseBio,
    SearchAndResolve,
)
from ports.session import SessionProviderPort
from ports.sink import ResultSinkPort
from ports.source import IdentitySourcePort


def build_pipeline(
    settings: Settings,
    source: IdentitySourcePort,
    session: SessionProviderPort,
    sink: ResultSinkPort,
) -> Pipeline:
    return Pipeline([
        LoadIdentity(source, settings),
        AuthenticateSession(session),
        SearchAndResolve(session, settings),
        ExtractProfile(settings),
        ParseBio(settings),
        FollowSecondaryLinks(settings),
        AggregateProfile(sink),
    ])


def enrich_one(
    settings: Settings,
    source: IdentitySourcePort,
    session: SessionProviderPort,
    sink: ResultSinkPort,
    run_id: str = "-",
    ctx: Optional[RunContext] = None,
) -> RunContext:
    """Resolve, extract and aggregate one identity record.

    Configuration for the source is checked before anything is read or launched.
    Fatal errors propagate after the context is marked Aborted; pass ``ctx`` to
    inspect the state history in that case.
    """
    ctx = ctx or RunContext(run_id=run_id)
    try:
        settings.require(*source.required_settings)
    except ConfigurationError as e:
        ctx.meta["error"] = str(e)
        ctx.transition(PipelineState.ABORTED)
        raise
    return build_pipeline(settings, source, session, sink).run(ctx)

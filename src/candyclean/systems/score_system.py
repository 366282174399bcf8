from esper import World

from candyclean.components.score import ScoreState
from candyclean.constants import DEFAULT_OBJECTIVE
from candyclean.events.bus import (
    EventBus,
    EVENT_CELLS_CLEARED,
    EVENT_DIFFICULTY_SELECTED,
    EVENT_SCORE_CHANGED,
    EVENT_SHOOT_REJECTED,
    EVENT_SHOOT_RESOLVED,
)


class ScoreSystem:
    """Keeps ScoreState in step with shot outcomes.

    Credits one addition unit per cleared cell, advances the streak once per
    resolved top-level shot and applies the penalty on rejected shots. Emits
    EVENT_SCORE_CHANGED after each mutation.
    """

    def __init__(self, world: World, event_bus: EventBus, objective: int = DEFAULT_OBJECTIVE):
        self.world = world
        self.event_bus = event_bus
        self.score_entity = self.world.create_entity(ScoreState(objective=objective))
        self.event_bus.subscribe(EVENT_CELLS_CLEARED, self.on_cells_cleared)
        self.event_bus.subscribe(EVENT_SHOOT_RESOLVED, self.on_shoot_resolved)
        self.event_bus.subscribe(EVENT_SHOOT_REJECTED, self.on_shoot_rejected)
        self.event_bus.subscribe(EVENT_DIFFICULTY_SELECTED, self.on_difficulty_selected)

    @property
    def score(self) -> ScoreState:
        return self.world.component_for_entity(self.score_entity, ScoreState)

    def reset(self, objective: int = DEFAULT_OBJECTIVE) -> ScoreState:
        score = ScoreState(objective=objective)
        self.world.add_component(self.score_entity, score)
        self._emit_changed(0)
        return score

    def on_difficulty_selected(self, sender, **kwargs):
        preset = kwargs.get('preset')
        if preset is None:
            return
        self.reset(preset.objective)

    def on_cells_cleared(self, sender, **kwargs):
        positions = kwargs.get('positions') or []
        if not positions:
            return
        delta = self.score.add_points(len(positions))
        self._emit_changed(delta)

    def on_shoot_resolved(self, sender, **kwargs):
        self.score.advance_streak()
        self._emit_changed(0)

    def on_shoot_rejected(self, sender, **kwargs):
        delta = self.score.penalize()
        self._emit_changed(delta)

    def _emit_changed(self, delta: int) -> None:
        score = self.score
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            points=score.points,
            objective=score.objective,
            multiplier=score.multiplier,
            streak=score.streak,
            delta=delta,
        )

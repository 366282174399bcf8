from blinker import Namespace


class EventBus:
    """Named blinker signals shared by every system of one game.

    Handlers are called synchronously as `fn(sender, **payload)` with the bus as
    sender. Receiver order is not guaranteed.
    """

    def __init__(self):
        self._signals = Namespace()

    def subscribe(self, name: str, fn):
        # Strong reference: systems are often created without being stored.
        self._signals.signal(name).connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        signal = self._signals.get(name)
        if signal is not None:
            signal.disconnect(fn)

    def emit(self, name: str, **payload):
        signal = self._signals.get(name)
        if signal is not None and signal.receivers:
            signal.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, mode=GameMode (at press time)
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers
EVENT_TILE_CLICK = "tile_click"            # payload: row, col


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_BOARD_READY = "board_ready"                  # payload: rows=int, cols=int, color_count=int
EVENT_SHOOT_RESOLVED = "shoot_resolved"            # payload: row, col, cleared=int, spawned=SpecialKind|None
EVENT_SHOOT_REJECTED = "shoot_rejected"            # payload: row, col, reason=str
EVENT_CELLS_CLEARED = "cells_cleared"              # payload: positions=[(r,c),...], origin=(r,c)
EVENT_SPECIAL_SPAWNED = "special_spawned"          # payload: row, col, kind=SpecialKind, color=ColorToken
EVENT_SPECIAL_DETONATED = "special_detonated"      # payload: row, col, kind=SpecialKind, depth=int
EVENT_BOARD_COMPACTED = "board_compacted"          # payload: columns=list[int]
EVENT_BOARD_REFILLED = "board_refilled"            # payload: positions=[(r,c),...]


# ============================================================================
# SCORE
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"          # payload: points, objective, multiplier, streak, delta
EVENT_OBJECTIVE_REACHED = "objective_reached"  # payload: points, objective


# ============================================================================
# GAME FLOW & MENU
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"          # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_DIFFICULTY_SELECTED = "difficulty_selected"      # payload: preset=DifficultyPreset

"""Towers of Hanoi, solved two ways on the explicit stack.

HanoiSolver is a hand-written stage machine: move the top n-1 disks aside
(a call), move the largest disk, then move the n-1 disks on top of it (a
tail call, so the frame rewrites itself). HanoiSteps expresses the same
recursion as a StepSequence.

Both mutate one shared HanoiBoard and return it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from unrecurse.algorithm import Algorithm
from unrecurse.continuation import CONTINUE, Call, Continuation, Result
from unrecurse.stepping import Mutate, PushCall, StepSequence, SteppingContinuation


class Peg(Enum):
    FIRST = 0
    SECOND = 1
    THIRD = 2


@dataclass
class HanoiBoard:
    """Three piles of disks, each listed bottom to top; disk n has width n."""

    size: int
    piles: list[list[int]]

    @classmethod
    def new(cls, size: int) -> HanoiBoard:
        if size < 0:
            raise ValueError(f"board size must be >= 0, got {size}")
        return cls(size=size, piles=[list(range(size, 0, -1)), [], []])

    def pile(self, peg: Peg) -> list[int]:
        return self.piles[peg.value]

    def move(self, source: Peg, target: Peg) -> bool:
        """Move the top disk from ``source`` to ``target``.

        Illegal moves (empty source, larger disk onto a smaller one) leave
        the board unchanged. Returns whether a disk moved.
        """
        from_pile = self.pile(source)
        to_pile = self.pile(target)
        if not from_pile:
            return False
        if to_pile and to_pile[-1] < from_pile[-1]:
            return False
        to_pile.append(from_pile.pop())
        return True

    @property
    def is_solved(self) -> bool:
        first, second, third = self.piles
        return not first and not second and third == list(range(self.size, 0, -1))


class Stage(Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


@dataclass
class HanoiMove:
    """Move ``amount`` disks from ``source`` to ``target`` using ``via``."""

    amount: int
    source: Peg
    target: Peg
    via: Peg
    stage: Stage = Stage.FIRST


@dataclass(frozen=True)
class AdvanceStage:
    """Resume action: the sub-move finished, go to ``stage``."""

    stage: Stage

    def __call__(self, move: HanoiMove, board: HanoiBoard, value: HanoiBoard) -> None:
        move.stage = self.stage


class HanoiSolver(Algorithm[int, HanoiMove, HanoiBoard, HanoiBoard]):
    def initialize(self, input: int) -> tuple[HanoiMove, HanoiBoard]:
        board = HanoiBoard.new(input)
        return HanoiMove(input, Peg.FIRST, Peg.THIRD, Peg.SECOND), board

    def step(self, state: HanoiMove, context: HanoiBoard) -> Continuation:
        if state.amount <= 0:
            return Result(context)

        if state.stage is Stage.FIRST:
            aside = HanoiMove(state.amount - 1, state.source, state.via, state.target)
            return Call(aside, AdvanceStage(Stage.SECOND))

        if state.stage is Stage.SECOND:
            context.move(state.source, state.target)
            state.stage = Stage.THIRD
            return CONTINUE

        # Tail call: this frame becomes the move of the n-1 disks onto the target.
        state.amount -= 1
        state.source, state.via = state.via, state.source
        state.stage = Stage.FIRST
        return CONTINUE


@dataclass(frozen=True)
class MoveDisk:
    source: Peg
    target: Peg

    def __call__(self, board: HanoiBoard) -> None:
        board.move(self.source, self.target)


@dataclass(frozen=True)
class HanoiSteps(StepSequence[int, HanoiBoard]):
    amount: int
    source: Peg
    target: Peg
    via: Peg

    @classmethod
    def initialize(cls, input: int) -> tuple[HanoiSteps, HanoiBoard]:
        return cls(input, Peg.FIRST, Peg.THIRD, Peg.SECOND), HanoiBoard.new(input)

    def steps(self) -> tuple[SteppingContinuation, ...]:
        if self.amount <= 0:
            return ()
        return (
            PushCall(HanoiSteps(self.amount - 1, self.source, self.via, self.target)),
            Mutate(MoveDisk(self.source, self.target)),
            PushCall(HanoiSteps(self.amount - 1, self.via, self.target, self.source)),
        )


def solve_hanoi(size: int) -> HanoiBoard:
    return HanoiSolver().run(size)


def solve_hanoi_steps(size: int) -> HanoiBoard:
    return HanoiSteps.run(size)


__all__ = [
    "AdvanceStage",
    "HanoiBoard",
    "HanoiMove",
    "HanoiSolver",
    "HanoiSteps",
    "MoveDisk",
    "Peg",
    "Stage",
    "solve_hanoi",
    "solve_hanoi_steps",
]

"""
Tests for the fold combinator and score projection.
"""
import asyncio

import pytest
from scorable_dispatch.resolution import BindingScope
from scorable_dispatch.scorables import FoldScorable, Scorable, fold, map_score


class FixedScorable(Scorable):
    """Scorable with a fixed outcome, recording commits."""

    def __init__(self, name, score=None, delay=0.0):
        self.name = name
        self._score = score
        self._delay = delay
        self.committed = []

    async def prepare(self, scope):
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._score is None:
            return None
        return {"name": self.name, "score": self._score}

    def score(self, state):
        return state["score"]

    def commit(self, state):
        self.committed.append(state)
        return self.name


class FailingScorable(Scorable):
    """Scorable whose preparation raises."""

    def __init__(self, error):
        self.error = error

    async def prepare(self, scope):
        raise self.error

    def score(self, state):
        raise AssertionError("never prepared")

    def commit(self, state):
        raise AssertionError("never prepared")


class BlockingScorable(Scorable):
    """Scorable that blocks until cancelled, exposing its task."""

    def __init__(self):
        self.task = None
        self.cancelled = False

    async def prepare(self, scope):
        self.task = asyncio.current_task()
        try:
            await asyncio.sleep(60)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return "never"

    def score(self, state):
        return 0

    def commit(self, state):
        raise AssertionError("cancelled scorables never commit")


def smaller_is_better(score):
    return score


@pytest.fixture
def scope():
    return BindingScope()


async def wait_for_start(blocking):
    while blocking.task is None:
        await asyncio.sleep(0)


class TestFold:
    """Tests for FoldScorable selection."""

    @pytest.mark.asyncio
    async def test_empty_fold_fails(self, scope):
        """Test that folding nothing never prepares, whatever the key."""
        assert await fold([], smaller_is_better).prepare(scope) is None
        assert await fold([], lambda score: -score).prepare(scope) is None
    
    @pytest.mark.asyncio
    async def test_all_declining_fails(self, scope):
        """Test that a fold fails when no child prepares."""
        folded = fold([FixedScorable("a"), FixedScorable("b")], smaller_is_better)
        
        assert await folded.prepare(scope) is None
    
    @pytest.mark.asyncio
    async def test_single_success_is_used(self, scope):
        """Test that the only participating child provides score and commit."""
        winner = FixedScorable("b", score=7)
        folded = fold([FixedScorable("a"), winner, FixedScorable("c")], smaller_is_better)
        
        state = await folded.prepare(scope)
        
        assert state.index == 1
        assert state.winner is winner
        assert folded.score(state) == 7
        assert folded.commit(state) == "b"
        assert winner.committed == [{"name": "b", "score": 7}]
    
    @pytest.mark.asyncio
    async def test_best_key_wins(self, scope):
        """Test that the child with the smallest key wins."""
        children = [FixedScorable("a", 5), FixedScorable("b", 2), FixedScorable("c", 9)]
        
        state = await fold(children, smaller_is_better).prepare(scope)
        assert state.winner.name == "b"
        
        state = await fold(children, lambda score: -score).prepare(scope)
        assert state.winner.name == "c"
    
    @pytest.mark.asyncio
    async def test_tie_goes_to_input_order(self, scope):
        """Test that exact ties pick the first child in input order."""
        children = [FixedScorable("slow", 1, delay=0.02), FixedScorable("fast", 1)]
        
        state = await fold(children, smaller_is_better).prepare(scope)
        
        assert state.winner.name == "slow"
    
    @pytest.mark.asyncio
    async def test_losers_are_not_committed(self, scope):
        """Test that only the winner's commit runs."""
        loser = FixedScorable("loser", 3)
        winner = FixedScorable("winner", 1)
        folded = fold([loser, winner], smaller_is_better)
        
        folded.commit(await folded.prepare(scope))
        
        assert loser.committed == []
        assert len(winner.committed) == 1
    
    @pytest.mark.asyncio
    async def test_nested_folds(self, scope):
        """Test that a fold can compete inside another fold."""
        inner = fold([FixedScorable("x", 4), FixedScorable("y", 3)], smaller_is_better)
        outer = fold([FixedScorable("z", 5), inner], smaller_is_better)
        
        state = await outer.prepare(scope)
        
        assert outer.score(state) == 3
        assert outer.commit(state) == "y"
    
    @pytest.mark.asyncio
    async def test_lone_participant_skips_key(self, scope):
        """Test that a single participating child wins without the key being called."""
        def key(score):
            raise AssertionError("key consulted")
        
        state = await fold([FixedScorable("a"), FixedScorable("b", 3)], key).prepare(scope)
        
        assert state.winner.name == "b"
    
    def test_fold_helper_builds_fold_scorable(self):
        """Test that fold() returns a FoldScorable over the given children."""
        children = [FixedScorable("a", 1)]
        folded = fold(iter(children), smaller_is_better)
        
        assert isinstance(folded, FoldScorable)
        assert folded.scorables == tuple(children)


class TestFoldFailures:
    """Tests for errors and cancellation inside folds."""

    @pytest.mark.asyncio
    async def test_hard_error_propagates_unmodified(self, scope):
        """Test that a child's exception reaches the caller as-is."""
        error = RuntimeError("handler exploded")
        folded = fold([FixedScorable("a", 1), FailingScorable(error)], smaller_is_better)
        
        with pytest.raises(RuntimeError) as exc_info:
            await folded.prepare(scope)
        
        assert exc_info.value is error
    
    @pytest.mark.asyncio
    async def test_first_error_in_input_order_propagates(self, scope):
        """Test that with several failures the earliest child's error is raised."""
        first = ValueError("first")
        second = KeyError("second")
        folded = fold([FailingScorable(first), FailingScorable(second)], smaller_is_better)
        
        with pytest.raises(ValueError) as exc_info:
            await folded.prepare(scope)
        
        assert exc_info.value is first
    
    @pytest.mark.asyncio
    async def test_cancelled_child_does_not_participate(self, scope):
        """Test that cancelling one child leaves the others to compete."""
        blocking = BlockingScorable()
        children = [FixedScorable("a", 4), blocking, FixedScorable("b", 2)]
        
        task = asyncio.create_task(fold(children, smaller_is_better).prepare(scope))
        await wait_for_start(blocking)
        blocking.task.cancel()
        state = await task
        
        assert blocking.cancelled
        assert state.winner.name == "b"
        assert state.index == 2
    
    @pytest.mark.asyncio
    async def test_only_cancelled_children_fail_preparation(self, scope):
        """Test that cancelled children don't count as successes."""
        blocking = BlockingScorable()
        
        task = asyncio.create_task(fold([blocking, FixedScorable("a")], smaller_is_better).prepare(scope))
        await wait_for_start(blocking)
        blocking.task.cancel()
        
        assert await task is None
    
    @pytest.mark.asyncio
    async def test_caller_cancellation_propagates(self, scope):
        """Test that cancelling the fold cancels in-flight children and the caller."""
        blocking = BlockingScorable()
        folded = fold([FixedScorable("a", 1), blocking], smaller_is_better)
        
        task = asyncio.create_task(folded.prepare(scope))
        await wait_for_start(blocking)
        task.cancel()
        
        with pytest.raises(asyncio.CancelledError):
            await task
        assert blocking.cancelled


class TestProjection:
    """Tests for map_score."""

    @pytest.mark.asyncio
    async def test_projected_score(self, scope):
        """Test that the projected scorable maps the score only."""
        inner = FixedScorable("a", 4)
        projected = map_score(inner, lambda score: score / 8)
        
        state = await projected.prepare(scope)
        
        assert projected.score(state) == 0.5
        assert projected.commit(state) == "a"
        assert inner.committed == [state]
    
    @pytest.mark.asyncio
    async def test_projected_decline(self, scope):
        """Test that a declining inner scorable still declines."""
        assert await map_score(FixedScorable("a"), str).prepare(scope) is None

import sys
from collections import Counter
import suite
from dgen import from_schema
from uscore import create, from_range, empty

test = suite.test
assert_that = suite.assert_that

# --- generated samples ---

score_schema = {
    'player': 'user_name',
    'score': ('pyint', {'min_value': 0, 'max_value': 50}),
    'team': {'_qen_provider': 'choice', 'from': ['red', 'blue', 'green']},
}


def _samples():
    """a spread of containers, from empty to generated records"""
    scores = from_schema(score_schema, seed=2024).take(30).map(lambda r: r['score'])
    return [
        empty(),
        create([7]),
        create([3, 1, 2, 3, 1]),
        create({'a': 5, 'b': 1, 'c': 5}),
        from_range(0, 17),
        scores,
    ]


@test("map(identity) preserves the values")
def test_map_identity():
    for c in _samples():
        assert_that(c.map(lambda v: v).to.list() == c.to.list(), f"identity map changed {c!r}")


@test("reversing twice restores the order")
def test_reverse_involution():
    for c in _samples():
        assert_that(c.reverse().reverse().to.list() == c.to.list(), f"double reverse changed {c!r}")


@test("sort is idempotent")
def test_sort_idempotent():
    for c in _samples():
        once = c.sort().to.list()
        assert_that(c.sort().sort().to.list() == once, f"sort not idempotent for {c!r}")


@test("uniq is idempotent")
def test_uniq_idempotent():
    for c in _samples():
        assert_that(c.uniq().uniq().to.list() == c.uniq().to.list(), f"uniq not idempotent for {c!r}")


@test("rotate(k) then rotate(-k) restores the order for any k")
def test_rotate_inverse():
    for c in _samples():
        for k in range(-20, 21):
            restored = c.rotate(k).rotate(-k).to.list()
            assert_that(restored == c.to.list(), f"rotate({k}) not undone for {c!r}")


@test("partition groups cover the container exactly")
def test_partition_cover():
    for c in _samples():
        truthy, falsy = c.partition(lambda v: v % 2 == 0).to.list()
        assert_that(len(truthy) + len(falsy) == len(c), "sizes should add up")
        assert_that(Counter(truthy + falsy) == Counter(c.to.list()), "same multiset of values")


@test("sort_by on generated records orders scores ascending and stays stable")
def test_sort_by_generated():
    records = from_schema(score_schema, seed=8).take(40)
    ordered = records.sort_by(lambda r: r['score']).to.list()
    scores = [r['score'] for r in ordered]
    assert_that(scores == sorted(scores), "scores should ascend")

    position = {id(r): i for i, r in enumerate(records.to.list())}
    for a, b in zip(ordered, ordered[1:]):
        if a['score'] == b['score']:
            assert_that(position[id(a)] < position[id(b)], "ties keep input order")


@test("group_by then flatten recovers every value")
def test_group_flatten_cover():
    records = from_schema(score_schema, seed=31).take(25)
    teams = records.group_by(lambda r: r['team'])
    assert_that(len(teams.flatten()) == 25 * 3, "flatten opens every record into its three fields")
    regrouped = teams.flat_map(lambda members: members)
    assert_that(len(regrouped) == 25, "every record belongs to exactly one team")


if __name__ == "__main__":
    sys.exit(suite.run(title="uscore property test suite"))

import suite
from dgen import from_schema
from seqy import S, over, from_range, InvalidArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_provider': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']},
    'skills': {'_provider': 'choice', 'from': ['python', 'sql', 'excel']},
    'kind': {'_provider': 'literal', 'value': 'person'},
    'display_name': {'_provider': 'ref', 'key': 'name'},
}

numbers = S([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
nested = S([[1, 2], [3, 4, 5], [], [6]])


class _Recorder:
    """a source that records how many elements have been pulled."""

    def __init__(self, data):
        self.data = data
        self.pulled = 0

    def __iter__(self):
        for item in self.data:
            self.pulled += 1
            yield item


# map()

@test("map transforms elements")
def test_map_basic():
    squares = S([1, 2, 3]).map(lambda n: n * n).to_list()
    assert_that(squares == [1, 4, 9], f"should square all numbers, got {squares}")


@test("map calls the selector once per element, in order")
def test_map_order():
    calls = []
    result = S([1, 2, 3]).map(lambda n: calls.append(n) or n).to_list()
    assert_that(calls == [1, 2, 3], f"selector calls out of order: {calls}")
    assert_that(result == [1, 2, 3], "map with identity should keep elements")


@test("map extracts record fields")
def test_map_records():
    people = from_schema(person_schema, seed=7).take(5)
    names = people.map(lambda p: p['name']).to_list()
    assert_that(len(names) == 5, "should extract 5 names")
    assert_that(all(isinstance(name, str) for name in names), "all names should be strings")


@test("map over records built from literal and reference fields")
def test_map_record_fields():
    people = from_schema(person_schema, seed=8).take(4)
    assert_that(people.map(lambda p: p['kind']).distinct().to_list() == ['person'], "literal field is constant")
    assert_that(people.all(lambda p: p['display_name'] == p['name']), "reference field copies the name")


# map_flat()

@test("map_flat flattens one level")
def test_map_flat():
    flattened = nested.map_flat(lambda x: x).to_list()
    assert_that(flattened == [1, 2, 3, 4, 5, 6], f"should flatten all sublists, got {flattened}")

    pairs = S([1, 2, 3]).map_flat(lambda n: [n, n * n]).to_list()
    assert_that(pairs == [1, 1, 2, 4, 3, 9], f"unexpected flattening {pairs}")

    deep = S([[[1]], [[2, 3]]]).map_flat(lambda x: x).to_list()
    assert_that(deep == [[1], [2, 3]], "only one level should be flattened")


@test("map_flat with string splitting")
def test_map_flat_split():
    words = S(['hello world', 'lazy sequences rock']).map_flat(str.split).to_list()
    assert_that(words == ['hello', 'world', 'lazy', 'sequences', 'rock'], f"unexpected words {words}")


# filter()

@test("filter keeps matching elements in order")
def test_filter_basic():
    evens = numbers.filter(lambda x: x % 2 == 0).to_list()
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")
    assert_that(numbers.filter(lambda x: x > 100).to_list() == [], "no match gives an empty result")


@test("filter on generated records")
def test_filter_records():
    people = from_schema(person_schema, seed=42).take(30)
    senior_eng = people.filter(lambda p: p['department'] == 'eng' and p['age'] > 40)
    assert_that(senior_eng.all(lambda p: p['department'] == 'eng' and p['age'] > 40),
                "every kept record should match")
    expected = [p for p in people if p['department'] == 'eng' and p['age'] > 40]
    assert_that(senior_eng.to_list() == expected, "filter should agree with a comprehension")


# take / skip family

@test("take returns the first n elements")
def test_take():
    assert_that(S([1, 2, 3]).take(2).to_list() == [1, 2], "take(2)")
    assert_that(S([1, 2, 3]).take(10).to_list() == [1, 2, 3], "take more than available")
    assert_that(S([1, 2, 3]).take(0).to_list() == [], "take(0) is empty")
    assert_that(S([1, 2, 3]).take(-1).to_list() == [], "negative take is empty")


@test("take stops pulling from the source")
def test_take_short_circuits():
    source = _Recorder(range(1000))
    assert_that(over(source).take(3).to_list() == [0, 1, 2], "take(3) result")
    assert_that(source.pulled == 3, f"only 3 elements should be pulled, got {source.pulled}")


@test("take works on an infinite generator")
def test_take_infinite():
    def naturals():
        n = 0
        while True:
            yield n
            n += 1
    assert_that(over(naturals).map(lambda n: n * 2).take(4).to_list() == [0, 2, 4, 6], "first 4 even numbers")


@test("skip drops the first n elements")
def test_skip():
    assert_that(S([1, 2, 3]).skip(2).to_list() == [3], "skip(2)")
    assert_that(S([1, 2, 3]).skip(10).to_list() == [], "skip past the end")
    assert_that(S([1, 2, 3]).skip(0).to_list() == [1, 2, 3], "skip(0) keeps everything")
    assert_that(S([1, 2, 3]).skip(-2).to_list() == [1, 2, 3], "negative skip keeps everything")


@test("take_while stops at the first failure")
def test_take_while():
    assert_that(S([1, 2, 3]).take_while(lambda n: n < 3).to_list() == [1, 2], "take_while(n < 3)")
    result = S([1, 5, 2, 1]).take_while(lambda n: n < 3).to_list()
    assert_that(result == [1], f"later matches should not be taken, got {result}")


@test("skip_while keeps the first failing element and everything after")
def test_skip_while():
    assert_that(S([1, 2, 3]).skip_while(lambda n: n < 3).to_list() == [3], "skip_while(n < 3)")
    result = S([1, 5, 2, 1]).skip_while(lambda n: n < 3).to_list()
    assert_that(result == [5, 2, 1], f"later matches should be kept, got {result}")


@test("take and skip partition a sequence")
def test_take_skip_partition():
    seq = from_range(1, 7)
    for n in range(0, 9):
        rebuilt = seq.take(n).concat(seq.skip(n)).to_list()
        assert_that(rebuilt == seq.to_list(), f"take({n}) + skip({n}) should rebuild the sequence")


# concat()

@test("concat appends each source in order")
def test_concat():
    result = S([1, 2]).concat([3, 4], S([5, 6])).to_list()
    assert_that(result == [1, 2, 3, 4, 5, 6], f"unexpected concat {result}")


@test("concat with no sources returns self")
def test_concat_none():
    seq = S([1])
    assert_that(seq.concat() is seq, "concat() should return the same sequence")


@test("concat accepts generator functions and validates sources")
def test_concat_sources():
    result = S([1]).concat(lambda: (n for n in [2, 3])).to_list()
    assert_that(result == [1, 2, 3], f"generator function source, got {result}")
    assert_raises(InvalidArgumentError, S([1]).concat, 5)


# each()

@test("each visits every element and returns self")
def test_each():
    seen = []
    seq = S([1, 2, 3])
    assert_that(seq.each(seen.append) is seq, "each should return the same sequence")
    assert_that(seen == [1, 2, 3], f"each should visit in order, got {seen}")


# laziness

@test("lazy operators do not touch the source until iterated")
def test_laziness():
    source = _Recorder([1, 2, 3])
    chained = (over(source)
               .map(lambda n: n + 1)
               .map_flat(lambda n: [n])
               .filter(lambda n: n > 0)
               .take(5)
               .skip(0)
               .take_while(lambda n: True)
               .skip_while(lambda n: False)
               .concat([9]))
    assert_that(source.pulled == 0, "building the chain should not pull anything")
    assert_that(chained.to_list() == [2, 3, 4, 9], "the chain should evaluate on demand")
    assert_that(source.pulled == 3, "the source should be pulled once per element")


@test("every operator returns a new sequence")
def test_new_instances():
    seq = S([1, 2, 3])
    for derived in [seq.map(lambda n: n), seq.filter(lambda n: True), seq.take(3), seq.skip(0),
                    seq.sort(), seq.reverse(), seq.distinct()]:
        assert_that(derived is not seq, "operators should not return the receiver")
    assert_that(seq.to_list() == [1, 2, 3], "the receiver should be unchanged")


@test("map fusion holds")
def test_map_fusion():
    f = lambda n: n + 3
    g = lambda n: n * 2
    assert_that(numbers.map(f).map(g).to_list() == numbers.map(lambda n: g(f(n))).to_list(),
                "map(f).map(g) should equal map(g . f)")


if __name__ == "__main__":
    suite.run(title="seqy core operations test suite")

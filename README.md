# agentic_evolve

A pattern library engine for AI agents. It takes code that has run
successfully, pulls reusable function patterns out of it, stores them,
and finds the best stored pattern for a new function signature. Later
builds can then take most of a function body straight from a pattern.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `agentic_evolve.model`: the data model.
  - `model.pattern`: `Pattern` (with `create`, `success_rate`,
    `record_use`, `to_dict`, `from_dict`), `FunctionSignature`,
    `ParamSignature`, `PatternVariable`, `Visibility` and `Language`
    (`Language.from_name("rs")` gives `Language.RUST`).
  - `model.skill`: `CrystallizedSkill`, `SkillMetadata`, `Complexity`,
    `SuccessfulExecution` and `TestResult`.
  - `model.match_result`: `MatchScore`, `MatchContext` and `MatchResult`.
  - `model.ids`: `EvolveId`, `PatternId` and `SkillId`.
  - `model.errors`: `EvolveError` and its subclasses such as
    `PatternNotFound`, `StorageError`, `SerializationError` and
    `CompositionError`.
- `agentic_evolve.crystallization`: `PatternExtractor` turns a
  `SuccessfulExecution` into patterns. Rust and Python code is split into
  its functions; code in other languages is treated as one function named
  `main`. It uses `VariableDetector`, `TemplateGenerator` (templates use
  `{{NAME}}` placeholders) and `ConfidenceCalculator`. Nothing is
  extracted when confidence is below 0.5.
- `agentic_evolve.storage`:
  - `PatternStore` keeps patterns in memory, and also as one
    `<id>.json` file per pattern when given a `data_dir`.
  - `PatternIndex` looks patterns up by name, domain, language, tag or
    return type.
  - `PatternVersioner` keeps JSON snapshots of pattern versions.
  - `write_patterns` and `read_patterns` handle the binary `.aevolve`
    format (magic `AEVL`, a version, a count, then length-prefixed JSON
    records).
- `agentic_evolve.matching`: `SignatureMatcher`, `ContextMatcher`,
  `FuzzyMatcher`, `SemanticMatcher`, and `CompositeMatcher`, which blends
  them using `MatchWeights`.
- `agentic_evolve.composition`: `PatternComposer` renders and joins
  templates. `IntegrationWeaver` hoists and deduplicates imports.
  `GapFiller` fills `/* GAP: ... */` markers. `AdapterGenerator` writes
  glue between two patterns.
- `agentic_evolve.collective`: `UsageTracker` counts uses per pattern and
  domain. `DecayManager` applies half-life confidence decay and usage
  boosts. `PromotionEngine` decides whether to promote, demote, maintain
  or prune a pattern.
- `agentic_evolve.optimization`: `PatternOptimizer` finds duplicate,
  similar and prunable patterns. `CacheManager` caches match results
  with a TTL.
- `agentic_evolve.cache`: a thread-safe generic `LruCache` with TTL
  (built directly or from an `LruCacheConfig`), `CacheMetrics`, and
  `CacheInvalidator` for cascading invalidation.
- `agentic_evolve.query`: `TokenBudget` for token budgets,
  `VersionedState` for delta queries (returning `Unchanged` or `Changed`),
  and `CursorPage` for cursor pagination.

## Example

```python
from agentic_evolve.model.pattern import Language
from agentic_evolve.model.skill import SuccessfulExecution, TestResult
from agentic_evolve.model.match_result import MatchContext
from agentic_evolve.crystallization.extractor import PatternExtractor
from agentic_evolve.storage.store import PatternStore
from agentic_evolve.matching.composite import CompositeMatcher

code = '''
pub fn fetch_user(id: u64) -> Option<User> {
    let url = "https://api.example.com/users";
    client.get(url).send()
}
'''

execution = SuccessfulExecution(
    code=code,
    language=Language.RUST,
    domain="http",
    test_results=[TestResult(name="fetch", passed=True, duration_ms=12)],
    execution_time_ms=40,
)

store = PatternStore()
for pattern in PatternExtractor().extract(execution):
    store.save(pattern)

wanted = store.list()[0].signature
context = MatchContext().with_domain("http")
for result in CompositeMatcher().find_matches(wanted, store.list(), context, 5):
    print(result.pattern.name, round(result.score.combined, 3))
```

## What it does not do

This is a library only. It has no command-line program and no server,
and it does not connect to any outside service. Storage is limited to
JSON files in a directory and the `.aevolve` byte format; there is no
database. Results cannot be cut down to identifiers or summaries by an
extraction level. Success streaks and recent success rates are not
tracked per pattern; `UsageTracker` and `Pattern.success_rate` give
overall success rates only.
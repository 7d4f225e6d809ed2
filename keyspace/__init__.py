"""
Keyspace -- Password Guessability Estimator
============================================

Estimates how many guesses an attacker needs to crack a password by
decomposing it into recognisable substructures (dictionary words,
keyboard walks, repeats, sequences, dates, recent years) and searching
for the non-overlapping decomposition with the fewest total guesses.

Modules:
    - keyspace.core.engine: Request-scoped estimation facade
    - keyspace.core.models: Pydantic match and result models
    - keyspace.matchers: Pattern matchers and the omnimatch orchestrator
    - keyspace.scoring: Guess estimation and optimal-sequence search
    - keyspace.data: Bundled frequency lists and keyboard graphs
    - keyspace.feedback: Warning and suggestion text
    - keyspace.time_estimates: Crack time scenarios and 0-4 score
    - keyspace.output: Console output
    - keyspace.cli: Click-based command-line interface

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
"""

__version__ = "1.0.0"
__tool_name__ = "keyspace"

"""
SEXPL End-to-End Example

Walks a program through every stage:
1. Scan source into tokens
2. Parse tokens into a tree
3. Evaluate the tree, capturing output and diagnostics
4. Reuse a session so variables carry over
5. Recover from malformed input

Run: pip install -e . && python examples/e2e/e2e.py
"""

from sexpl import CaptureLogger, ConsoleLogger, Evaluator, Session, parse, scan
from sexpl.expr import format_expr

print("=== SEXPL E2E Demo ===\n")

source = """(
  (set name "world")
  (print (add "hello " (get name)))
  (print (div (mult 6 7) 4))
)"""

# 1. Scan
log = CaptureLogger()
tokens = scan(source, log)
print(f"1. Scanned {len(tokens)} tokens")
print(f"   First three: {tokens[:3]}\n")

# 2. Parse
tree = parse(tokens, log)
print("2. Parsed tree")
print(f"   {format_expr(tree)}\n")

# 3. Evaluate
result = Evaluator(log).evaluate(tree)
print("3. Evaluated")
print(f"   Output: {log.output}")
print(f"   Result: {result}")
print(f"   Diagnostics: {log.errors}\n")

# 4. Session
sess = Session(ConsoleLogger())
print("4. Session output:")
sess.run("(set total (add 1 2 3))")
sess.run("(print (mult (get total) 10))")
print(f"   Variables: {sess.env}\n")

# 5. Recovery
print("5. Malformed input (diagnostics on stderr):")
bad = Session(ConsoleLogger())
r = bad.run('((print "ok") (sub 5 "x") (nope) (add 1')
print(f"   Result: {r!r}")

# coding: utf8

import strictini

text = """; last modified 1 April 2001 by John Doe
[owner]
name = John Doe
organization = Acme Inc.

[database]
server = 192.0.2.62
port = 143
file = "payroll.dat"
"""

doc = strictini.Document.from_str(text)
rendered = doc.to_str()

print(rendered)
print(strictini.Document.from_str(rendered) == doc)

try:
    strictini.loads("name = value\n[owner]")
except strictini.ParseError as e:
    print(f"{e.kind.name} on line {e.lineno}")

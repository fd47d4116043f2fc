# coding: utf8

import strictini

doc = strictini.Document.from_file("example.ini")

print(doc.get_section_names())
print(doc.get("owner", "name"))

doc.set("owner", "name", input("new owner name > "))

try:
    doc.set("owner", "email", "john@example.com")
except strictini.KeyNotExistError as e:
    print(f"can't add keys with set(): {e}")

doc.save_file("example_out.ini")

"""Build BEM class names for a small menu, zero config, zero deps."""

from bemcn import block

b = block("menu")
print(b)
print(b("item", {"theme": "dark"}).mix(["extra"]).state({"open": True}))
print(b("item")("link", {"active": True}).split())

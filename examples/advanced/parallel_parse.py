"""Thread safe: parse and render 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from mdhtml import parse, render_fragment


def convert(source: str) -> str:
    return render_fragment(parse(source))


docs = ["# Doc " + str(i) + "\n\nContent for **document** " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(convert, docs))

print(f"Converted {len(results)} documents in parallel")
print("First:", results[0].replace("\n", " "))
print("Last:", results[-1].replace("\n", " "))

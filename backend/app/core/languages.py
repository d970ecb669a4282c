from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    name: str
    label: str
    judge0_id: int
    template: str


JAVASCRIPT_TEMPLATE = """// JS Example
function add(a, b) {
  return a + b;
}
console.log(add(2, 3));"""

PYTHON_TEMPLATE = """# Python Example
def add(a, b):
    return a + b

print(add(2, 3))"""

CPP_TEMPLATE = """#include <bits/stdc++.h>
using namespace std;
int main() {
    cout << 2 + 3 << endl;
    return 0;
}"""

C_TEMPLATE = """#include <stdio.h>
int main() {
    printf("%d\\n", 2 + 3);
    return 0;
}"""

JAVA_TEMPLATE = """public class Main {
    public static void main(String[] args) {
        System.out.println(2 + 3);
    }
}"""

# Judge0 CE language ids
LANGUAGES: dict[str, Language] = {
    lang.name: lang
    for lang in (
        Language("javascript", "JavaScript (Node.js)", 63, JAVASCRIPT_TEMPLATE),
        Language("python", "Python 3", 71, PYTHON_TEMPLATE),
        Language("cpp", "C++ (GCC)", 54, CPP_TEMPLATE),
        Language("c", "C (GCC)", 50, C_TEMPLATE),
        Language("java", "Java", 62, JAVA_TEMPLATE),
    )
}

LANGUAGE_MAP: dict[str, int] = {name: l.judge0_id for name, l in LANGUAGES.items()}

DEFAULT_LANGUAGE = "javascript"


def resolve_language_id(name: str) -> int | None:
    return LANGUAGE_MAP.get(name)

from setuptools import setup

with open("requirements.txt", "r") as f:
    install_requires = [s for s in f.read().splitlines() if s and not s.startswith("--")]

setup(
    name="caseinsensitivestr",
    version="0.1.0",
    description="Case-insensitive strings that keep their original case",
    packages=["caseinsensitivestr"],
    install_requires=install_requires,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    zip_safe=False
)

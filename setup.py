from setuptools import setup, find_namespace_packages

setup(
    name="grobnerAlg",
    version="0.1.0",
    author="ilay menahem",
    author_email="ilay.menahem@campus.technion.ac.il",
    description="Reduced Groebner bases with Buchberger's algorithm, and Euclidean ring utilities",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/ilaymenahem/grobnerRl",
    packages=find_namespace_packages(include=["grobnerAlg", "grobnerAlg.*"]),
    install_requires=[
        'tqdm',
        'numpy',
        'matplotlib',
        'sympy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)

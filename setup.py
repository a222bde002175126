# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, setup

try:
    import numpy as np
except ImportError:
    raise RuntimeError(
        "NumPy is required to build this package. Please install it first."
    )

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
    # Heap elements are arbitrary Python objects; keep annotations untyped.
    "annotation_typing": False,
}

NUMPY_C_API = [
    ("NPY_NO_DEPRECATED_API", "NPY_1_9_API_VERSION")
]

# Pure-Python modules compiled by Cython; each stays importable uncompiled.
source_files = [
    ("src.dary_heap.dary_heap", "src/dary_heap/dary_heap.py"),
]


def create_extensions(source_files: list[tuple]) -> list[Extension]:
    """
    Create a Cython extension for every available source file.

    Parameters
    ----------
    source_files : list[tuple]
        A list of tuples. The first element of the tuple is the module in
        `Package.module` format. The second element is the `path` to the file.

    Returns
    -------
    list[Extension]
        A list of Cython extensions
    """
    extensions = []
    for module_name, source_path in source_files:
        extra_compile_args = [
            f"-D{name}={value}"
            for name, value in NUMPY_C_API
        ]
        if sys.platform != "win32":
            extra_compile_args.append("-O3")

        extension = Extension(
            name=module_name,
            sources=[source_path],
            include_dirs=[np.get_include()],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        extensions.append(extension)
    return extensions


def main() -> None:
    """Main setup function for compiling"""
    # Filter out non-existing files
    files = [
        (name, path)
        for name, path in source_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No source files found to compile")

    extensions = create_extensions(files)

    setup(
        ext_modules=cythonize(
            extensions,
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=["src", "src.dary_heap"],
        zip_safe=False
    )


if __name__ == "__main__":
    main()

import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

typed_packages = sorted(p.parent.name for p in here.glob("ethereum_codec_*/py.typed"))

setuptools.setup(
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_data={package: ["py.typed"] for package in typed_packages},
)

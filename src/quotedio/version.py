from importlib.metadata import PackageNotFoundError, version

try:
    version = version("QuotedIO")
except PackageNotFoundError:
    version = "0.0.0"

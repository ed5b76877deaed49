"""Predicate for deciding if a package belongs to the platform libraries."""

# Public packages shipped with the runtime libraries. Types in these packages
# keep package directories even when the project suppresses them, so that
# platform headers can still be found.
PLATFORM_PACKAGES: frozenset[str] = frozenset(
    {
        "android",
        "com.android.internal.util",
        "com.google.common",
        "com.google.common.annotations",
        "com.google.common.base",
        "com.google.common.cache",
        "com.google.common.collect",
        "com.google.common.hash",
        "com.google.common.io",
        "com.google.common.math",
        "com.google.common.net",
        "com.google.common.primitives",
        "com.google.common.util",
        "com.google.j2objc",
        "com.google.protobuf",
        "dalvik",
        "java",
        "javax",
        "junit",
        "libcore",
        "org.apache.harmony",
        "org.hamcrest",
        "org.json",
        "org.junit",
        "org.kxml2",
        "org.mockito",
        "org.w3c",
        "org.xml.sax",
        "org.xmlpull",
        "sun.misc",
    }
)


def is_platform_package(package_name: str | None) -> bool:
    """Check if any dotted prefix of the package is a platform package."""
    if not package_name:
        return False
    prefix = ""
    for part in package_name.split("."):
        prefix = f"{prefix}.{part}" if prefix else part
        if prefix in PLATFORM_PACKAGES:
            return True
    return False

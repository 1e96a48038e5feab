from dircompare.core.models import FingerprintMode

FINGERPRINT_ALIASES = {
    "exact": FingerprintMode.EXACT,
    "sha256": FingerprintMode.SHA256,
    "xxhash": FingerprintMode.XXHASH,
}

FINGERPRINT_CHOICES = list(FINGERPRINT_ALIASES.keys())

FINGERPRINT_HELP_TEXT = "How file contents are compared:\n" + "".join(
    f"  {alias:<8}: {mode.description}\n" for alias, mode in FINGERPRINT_ALIASES.items()
)

REPORT_HELP_TEXT = {
    "commononly": (
        "Only list content that occurs in more than one folder.\n"
        "Duplicates inside a single folder are not listed."
    ),
    "diffonly": (
        "Only list the differences, i.e. content that either\n"
        "  (a) doesn't occur in all folders, or\n"
        "  (b) doesn't have the same name in all folders, or\n"
        "  (c) occurs more than once in at least one folder"
    ),
}

EPILOG_TEXT = """
Examples:
  Compare two backup folders
  %(prog)s ~/backup-2024 ~/backup-2025

  Only show what differs between three mirrors, ignoring everything but .jpg
  %(prog)s mirror1 mirror2 mirror3 --diffonly --extension jpg

  Only show content present in more than one folder, with wider columns
  %(prog)s photos phone-dump --commononly --colwidth 40

  Large trees: hash instead of keeping bytes, fingerprint on 8 threads
  %(prog)s /mnt/a /mnt/b --recursive --hash sha256 --workers 8

Exit codes:
  0  success
  1  a file or directory could not be read
  2  invalid arguments
"""

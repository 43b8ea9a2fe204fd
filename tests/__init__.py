"""Tests for foldercmp.

Test Files and Coverage:
========================

| Test File                | Test Classes              | Tested Constructs                    | Tested Functionalities                      |
|--------------------------|---------------------------|--------------------------------------|---------------------------------------------|
| utils/test_digest.py     | ComputeDigestTest         | compute_digest(), digest_length()    | Known digests, chunking, algorithms, errors |
| utils/test_scanner.py    | FileExtensionTest         | file_extension()                     | Final extension, dot files, trailing dot    |
|                          | ScanDirectoryTest         | scan_directory()                     | Filtering, no recursion, failure reporting  |
| test_comparison.py       | ComparisonTest            | Comparison, ComparisonResult         | Grouping, partition, sorting, hash failures |
|                          | IsDifferenceTest          | is_difference()                      | Diff-only rules                             |
| test_table.py            | FixedLengthTest           | fixed_length()                       | Truncation, padding, grapheme clusters      |
|                          | TableRendererTest         | TableRenderer                        | Header, cells, ordinals, blank lines        |
| test_issues.py           | ComparisonIssueTest       | ComparisonIssue.message()            | Diagnostic texts                            |
| test_settings.py         | SettingsTest              | Settings                             | TOML loading, dotted keys, logging setup    |
| test_cli.py              | CliTest                   | foldercmp_main()                     | End-to-end scenarios, options, diagnostics  |
"""

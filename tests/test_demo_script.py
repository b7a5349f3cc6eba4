from __future__ import annotations

from scripts.demo_documents import main


def test_demo_prints_every_section(capsys):
    main(["--pause-ms", "0", "--quiet"])

    output = capsys.readouterr().out
    assert "Search by title prefix 'Java':" in output
    assert "- Java Basics by John Doe" in output
    assert "- Python Intro by Jane Smith" in output
    assert "Search by creation time (all documents):" in output
    assert output.count("Advanced Java") == 2

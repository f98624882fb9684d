"""
Test script for main.py
Tests the command-line entry point in execute, file and interactive modes
"""

import io
import logging
import os
import shutil
import sys
from contextlib import redirect_stdout, redirect_stderr

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from homemade_db import main as cli


def run_main(argv, stdin_lines=None):
    """Run main() and return (status, stdout, stderr)"""
    out, err = io.StringIO(), io.StringIO()
    saved_stdin = sys.stdin
    if stdin_lines is not None:
        sys.stdin = io.StringIO("".join(line + "\n" for line in stdin_lines))
    try:
        with redirect_stdout(out), redirect_stderr(err):
            status = cli.main(argv)
    finally:
        sys.stdin = saved_stdin
    return status, out.getvalue(), err.getvalue()


def test_main():
    """Test the entry point"""
    print("Testing main.py...")

    test_dir = './test_data_main'
    if os.path.exists(test_dir):
        shutil.rmtree(test_dir)
    os.makedirs(test_dir)

    # Test 1: --execute
    print("\n1. Testing --execute...")
    status, out, _ = run_main(["--execute", "insert 1 alice"])
    assert status == 0
    assert out == "This is where we would do an insert.\nExecuted.\n"
    status, out, _ = run_main(["-e", "delete 1"])
    assert out == "Unrecognized  keyword at start of: 'delete 1'\n"
    print("✓ Execute mode works")

    # Test 2: --file stops at .exit
    print("\n2. Testing --file...")
    script = os.path.join(test_dir, 'commands.txt')
    with open(script, 'w') as f:
        f.write("insert\n\nSELECT * \n.foo\n.exit\nselect\n")
    status, out, _ = run_main(["--file", script])
    assert status == 0
    assert out.splitlines() == [
        "This is where we would do an insert.",
        "Executed.",
        "This is where we would do a select.",
        "Executed.",
        "Unrecognized command: '.foo'",
        "Exiting - Good bye.",
    ]
    print("✓ File mode works")

    # Test 3: --file without .exit, both EOF policies
    print("\n3. Testing end of file...")
    script = os.path.join(test_dir, 'no_exit.txt')
    with open(script, 'w') as f:
        f.write("select\r\n")
    status, out, _ = run_main(["-f", script])
    assert status == 0
    assert out.splitlines()[-1] == "Executed."
    status, _, err = run_main(["-f", script, "--on-eof", "fail"])
    assert status == 1
    assert err.startswith("Error: ")
    print("✓ EOF policy applied")

    # Test 4: missing file
    print("\n4. Testing missing file...")
    status, _, err = run_main(["--file", os.path.join(test_dir, 'missing.txt')])
    assert status == 1
    assert "File not found" in err
    print("✓ Missing file reported")

    # Test 5: interactive mode on stdin
    print("\n5. Testing interactive mode...")
    status, out, _ = run_main([], stdin_lines=["select", ".exit", "insert"])
    assert status == 0
    assert out == ("homemadeDB > This is where we would do a select.\nExecuted.\n"
                   "homemadeDB > Exiting - Good bye.\n")
    print("✓ Interactive mode works")

    print("\n" + "="*50)
    print("✅ All main tests passed!")
    print("="*50)

    shutil.rmtree(test_dir)


def test_setup_logging():
    """Log records go to the configured file; repeated setup replaces handlers"""
    test_dir = './test_data_logging'
    if os.path.exists(test_dir):
        shutil.rmtree(test_dir)
    os.makedirs(test_dir)

    log_path = os.path.join(test_dir, 'homemade_db.log')
    logger = logging.getLogger('homemade_db')
    try:
        cli.setup_logging(log_path, debug=True)
        cli.setup_logging(log_path, debug=True)
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        logging.getLogger('homemade_db.parser').debug("setup record")
    finally:
        cli.setup_logging()
        logger.setLevel(logging.NOTSET)

    # Back to a single silent handler, file closed
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]

    with open(log_path) as f:
        content = f.read()
    assert content.count("[DEBUG] setup record") == 1

    shutil.rmtree(test_dir)


def test_repeated_runs_do_not_stack_handlers():
    logger = logging.getLogger('homemade_db')
    for _ in range(3):
        run_main(["--execute", "select"])
    assert len(logger.handlers) == 1
    logger.setLevel(logging.NOTSET)


def test_unreadable_file():
    """A path that cannot be read as text is reported, not raised"""
    test_dir = './test_data_unreadable'
    if os.path.exists(test_dir):
        shutil.rmtree(test_dir)
    os.makedirs(test_dir)

    # Directory instead of a file
    status, out, err = run_main(["--file", test_dir])
    print(f"   {err.strip()}")
    assert status == 1
    assert out == ""
    assert err.startswith("Error: ")

    # Bytes that are not valid UTF-8
    binary = os.path.join(test_dir, 'binary.txt')
    with open(binary, 'wb') as f:
        f.write(b"select\n\xff\xfe\n.exit\n")
    status, out, err = run_main(["--file", binary])
    print(f"   {err.strip()}")
    assert status == 1
    assert out == ""
    assert err.startswith("Error: ")

    shutil.rmtree(test_dir)


if __name__ == '__main__':
    test_main()
    test_setup_logging()
    test_repeated_runs_do_not_stack_handlers()
    test_unreadable_file()

from docguard.cli import main

main(prog_name="docguard")

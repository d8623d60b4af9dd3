from smalllinalg.demo import main, run


def test_output_starts_with_matrix():
    lines = run().splitlines()
    assert lines[0] == "[ 1, 2 ]"
    assert lines[1] == "[ 3, 4 ]"


def test_labels_appear_in_order():
    out = run()
    labels = [
        "Trace(M)        = ",
        "FrobeniusNorm  = ",
        "Vector Norm2   = ",
        "GEMV result    = ",
        "GEMM result    = ",
        "Eigenvalues    = ",
    ]
    positions = [out.index(label) for label in labels]
    assert positions == sorted(positions)


def test_gemm_block_repeats_matrix():
    lines = run().splitlines()
    start = lines.index("GEMM result    = ")
    assert lines[start + 1 : start + 3] == lines[0:2]


def test_eigenvalues_block():
    lines = run().splitlines()
    start = lines.index("Eigenvalues    = ")
    assert lines[start + 1 : start + 3] == ["[ 1 ]", "[ 3 ]"]


def test_main_prints_run_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == run()
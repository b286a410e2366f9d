from spektree.tree import describe, it, xit


def _ok():
    pass


def _boom():
    raise ValueError("boom")


spec = describe("root",
    describe("addition",
        it("adds", _ok),
        xit("pending"),
    ),
    describe("division",
        it("raises", _boom),
    ),
)

passing = describe("all good", it("works", _ok))


def build():
    return describe("built", it("works", _ok))


not_a_node = 42


def exploding():
    raise RuntimeError("cannot build")

"""Example driver: three cases covering each expectation kind."""

from die import Framework, assert_eq, assert_ne


def smart_kitty():
    i = 0
    i += 1
    assert_eq(i, 1)


def kitty_panic():
    i = 0
    i += 1
    assert_ne(i, 1)


def kitty_throws_up():
    raise RuntimeError("burps")


def main() -> int:
    tests = Framework("hello kitty", "Testing the powers of Hello Kitty!")
    tests.display_greetings()

    tests.add_should_not_panic("smart kitty", smart_kitty)
    tests.add_should_panic("kitty panic", kitty_panic)
    tests.add_should_throw("kitty throws up", RuntimeError("burps"), "RuntimeError", kitty_throws_up)

    tests.exec()
    tests.display_summary()
    return tests.summary().exit_code


if __name__ == "__main__":
    raise SystemExit(main())

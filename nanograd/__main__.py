# nanograd/__main__.py
from . import Value


def main():
    print("Hello from nanograd, a scalar-valued autograd engine!")
    a = Value(5.0)
    print(f"The value here is: {a}")
    seven = Value(7.0)
    ten = Value(10.0)
    c = a + seven
    e = c * ten
    print(f"The new value is: {e}")
    print(f"Built from: {e.display_parents()}")
    e.backward()
    for name, v in (("a", a), ("7", seven), ("10", ten), ("c", c)):
        print(f"  d(e)/d({name}) = {v.grad}")


if __name__ == "__main__":
    main()

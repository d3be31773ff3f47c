# demos/demo_quickstart.py
from langtour.core.tour import Student, make_triple, positional


def main():
    # Just prove imports & the two record kinds work
    t = make_triple(500, 6.4, 1)
    s = Student.new("Ram", "ram@example.com", 20, 75, "Physics")
    print("Imports OK. triple:", positional(t), "marks:", s.get_marks())


if __name__ == "__main__":
    main()

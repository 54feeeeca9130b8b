from reactive_property import reactive_property


def noop():
    pass


# @profile
def main():
    prop = reactive_property()

    for _ in range(10):
        prop.on(noop)

    for i in range(100000):
        prop(i)
    _ = prop()
    prop.destroy()


if __name__ == "__main__":
    main()

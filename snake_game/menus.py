"""Selection state for the list menus (main menu, pause menu)."""


class Menu:
    def __init__(self, options):
        self.options = tuple(options)
        self.selected = 0

    def __len__(self):
        return len(self.options)

    @property
    def current(self):
        return self.options[self.selected]

    def previous(self):
        self.selected = (self.selected - 1) % len(self.options)

    def next(self):
        self.selected = (self.selected + 1) % len(self.options)

    def reset(self):
        self.selected = 0

from PySide6.QtCore import QObject, Signal, Slot


class GameEvents(QObject):
    """
    signals fired by the game on every state change
    connect slots to listen, nothing needs to be connected
    """
    # object, not int: rejected coords can exceed a C int
    move_made = Signal(object, object, str)      # row, col, mark
    move_rejected = Signal(object, object, str)  # row, col, reason
    turn_changed = Signal(str)                   # name of the player to move
    game_finished = Signal(str)                  # winner name, "" for a draw
    notification = Signal(str)                   # free-form message

    def notify(self, msg):
        # shortcut for the free-form channel
        self.notification.emit(msg)


class ConsoleNotifier(QObject):
    """
    prints notifications to stdout
    """
    def __init__(self, events=None, parent=None):
        super().__init__(parent)
        if events is not None:
            self.attach(events)

    def attach(self, events):
        events.notification.connect(self.update)

    def detach(self, events):
        events.notification.disconnect(self.update)

    @Slot(str)
    def update(self, msg):
        print(f"Notification: {msg}")

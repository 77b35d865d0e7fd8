"""
Usage messages returned inside InvalidCommand values.
"""

INVALID_COMMAND_MESSAGE = "Invalid command!"

ADD_USAGE_MESSAGE = """Invalid command!
Please enter your commands in the following format:
add -e EVENT_NAME -t TIME -v VENUE
add -p PARTICIPANT_NAME -e EVENT_NAME"""

REMOVE_USAGE_MESSAGE = """Invalid command!
Please enter your commands in the following format:
remove -e EVENT_NAME
remove -p PARTICIPANT_NAME -e EVENT_NAME"""

VIEW_USAGE_MESSAGE = """Invalid command!
Please enter your commands in the following format:
view -e EVENT_NAME"""

MARK_USAGE_MESSAGE = """Invalid command!
Please enter your commands in the following format:
mark -e EVENT -s STATUS"""

STATUS_USAGE_MESSAGE = (
    "Invalid event status!\n"
    'Please set the event status as either "done" or "undone"\n'
)

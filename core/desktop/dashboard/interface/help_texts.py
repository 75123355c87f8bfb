"""Static key reference shown in each controller's help overlay."""

BOOKMARK_HELP = (
    "[ Select Bookmark ]",
    "Open Bookmark           : Enter",
    "Focus Move Up           : Up, Left",
    "Focus Move Down         : Down, Right",
    "Execute Delete Bookmark : Shift+D",
    "Reload Bookmarks        : Shift+R",
    "Open Add Bookmark       : F2",
    "Open Edit Bookmark      : F3",
    "",
    "[ Add Bookmark ]",
    "Move Input Form     : Tab, Shift+Tab, Up, Down",
    "Execute Add Bookmark: F12",
    "Close Form          : Esc",
    "",
    "[ Edit Bookmark ]",
    "Move Input Form      : Tab, Shift+Tab, Up, Down",
    "Execute Edit Bookmark: F12",
    "Close Form           : Esc",
)

SCHEDULE_HELP = (
    "[ Select Schedule ]",
    "Open Schedule           : Enter",
    "Focus Move Up           : Up, Left",
    "Focus Move Down         : Down, Right",
    "Execute Delete Schedule : Shift+D",
    "Reload Schedules        : Shift+R",
    "Open Add Schedule       : F2",
    "Open Edit Schedule      : F3",
    "",
    "[ Add Schedule ]",
    "Move Input Form          : Tab, Shift+Tab, Up, Down",
    "Execute Add Schedule     : F12",
    "Start/End Datetime Format: yyyy-mm-ddThh:mm:ss",
    "",
    "[ Edit Schedule ]",
    "Move Input Form          : Tab, Shift+Tab, Up, Down",
    "Execute Edit Schedule    : F12",
    "Start/End Datetime Format: yyyy-mm-ddThh:mm:ss+hh:mm",
)

TASK_HELP = (
    "[ Select Task ]",
    "Open Task            : Enter",
    "Focus Move Up        : Up, Left",
    "Focus Move Down      : Down, Right",
    "Execute Complete Task: Shift+C",
    "Execute Delete Task  : Shift+D",
    "Reload Tasks         : Shift+R",
    "Open Add Task        : F2",
    "Open Edit Task       : F3",
    "",
    "[ Add Task ]",
    "Move Input Form   : Tab, Shift+Tab, Up, Down",
    "Execute Add Task  : F12",
    "Due Datetime Format: yyyy-mm-ddThh:mm:ss",
    "",
    "[ Edit Task ]",
    "Move Input Form    : Tab, Shift+Tab, Up, Down",
    "Execute Edit Task  : F12",
    "Due Datetime Format: yyyy-mm-ddThh:mm:ss.000Z",
)

VIRTUALBOX_HELP = (
    "[ Select VirtualBox ]",
    "Start Machine  : Enter",
    "Focus Move Up  : Up, Left",
    "Focus Move Down: Down, Right",
)

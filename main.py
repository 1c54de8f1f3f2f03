# main.py
"""
SQL Cheat Sheet: rumps menubar + PyObjC popover with a searchable SQL reference.

Requirements:
- python -m pip install rumps python-dotenv pyobjc
- Optional settings in .env (see sql_config.py)

Behavior:
- Uses rumps for the menubar item, timers and notifications.
- Uses AppKit (PyObjC) for a transient popover: search field, highlighted
  results with collapsible sections, copy-to-clipboard links.
- Falls back to rumps.alert (plain text) if PyObjC isn't available.
"""
import os
import sys
import logging
import subprocess

# UI: rumps for menu bar
try:
    import rumps
except Exception:
    print("Install rumps: pip install rumps")
    raise

# Attempt to import PyObjC / AppKit for the native popover
PYOBJC_AVAILABLE = False
try:
    from AppKit import (
        NSApplication, NSApp, NSApplicationActivationPolicyAccessory,
        NSPopover, NSViewController, NSView, NSWindow, NSMakeRect, NSBackingStoreBuffered,
        NSScrollView, NSTextView, NSTextField, NSSearchField, NSFont, NSColor, NSCursor,
        NSViewWidthSizable, NSViewHeightSizable, NSViewMinYMargin, NSViewMaxYMargin, NSViewMinXMargin,
        NSPasteboard, NSPasteboardTypeString, NSEvent, NSEventMaskKeyDown,
        NSFontAttributeName, NSForegroundColorAttributeName, NSBackgroundColorAttributeName,
        NSLinkAttributeName, NSCursorAttributeName, NSTextAlignmentRight,
    )
    from Foundation import NSObject, NSMutableAttributedString, NSAttributedString
    from PyObjCTools import AppHelper
    import objc
    PYOBJC_AVAILABLE = True
except Exception:
    PYOBJC_AVAILABLE = False

from sql_config import APP_NAME, Config, load_config
from sql_data import build_catalog
from sql_render import COPIED_LABEL, COPY, TOGGLE, Run, parse_link, render_sections, runs_to_text
from sql_search import DelayedCall, SearchViewModel, delayed_scheduler

STATUS_TITLE = "⛁"
POPOVER_EDGE_MIN_Y = 1        # NSRectEdgeMinY
POPOVER_BEHAVIOR_TRANSIENT = 1  # closes when clicking outside
KEYCODE_SPACE = 49
KEYCODE_F = 3

# keep windows referenced so they do not get GC'd
GLOBAL_WINDOWS = []


# ---------------- Logging ----------------
def setup_logging(config: Config):
    logging.basicConfig(filename=config.log_file, level=logging.DEBUG,
                        format="%(asctime)s %(levelname)s %(message)s")
    console = logging.StreamHandler()
    console.setLevel(getattr(logging, config.log_level, logging.INFO))
    console.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logging.getLogger().addHandler(console)
    logging.info("SQL Cheat Sheet startup")


# ---------------- Delayed calls on the main run loop ----------------
def main_loop_scheduler():
    """Debounce scheduler backed by AppHelper.callLater; None runs searches inline."""
    if not PYOBJC_AVAILABLE:
        return None
    return delayed_scheduler(AppHelper.callLater)


# ---------------- Clipboard ----------------
def copy_to_clipboard(text: str) -> bool:
    if PYOBJC_AVAILABLE:
        try:
            pb = NSPasteboard.generalPasteboard()
            pb.clearContents()
            return bool(pb.setString_forType_(text, NSPasteboardTypeString))
        except Exception:
            logging.exception("NSPasteboard copy failed")
    if sys.platform == "darwin":
        try:
            subprocess.run(["pbcopy"], input=text.encode("utf-8"), check=True)
            return True
        except Exception:
            logging.exception("pbcopy failed")
    return False


# ---------------- Native popover UI (macOS) ----------------
if PYOBJC_AVAILABLE:

    def _font_for(style: str):
        if style == "title":
            return NSFont.boldSystemFontOfSize_(15.0)
        if style == "code":
            return NSFont.monospacedSystemFontOfSize_weight_(12.0, 0)
        if style == "description":
            return NSFont.systemFontOfSize_(13.0)
        if style in ("count", "action"):
            return NSFont.systemFontOfSize_(11.0)
        if style == "empty":
            return NSFont.boldSystemFontOfSize_(16.0)
        return NSFont.systemFontOfSize_(12.0)

    def _color_for(run: Run):
        if run.style in ("description", "explanation", "count"):
            return NSColor.secondaryLabelColor()
        if run.style == "action":
            return NSColor.systemGreenColor() if run.text == COPIED_LABEL else NSColor.systemBlueColor()
        return NSColor.labelColor()

    def attributed_from_runs(runs):
        out = NSMutableAttributedString.alloc().init()
        highlight = NSColor.systemYellowColor().colorWithAlphaComponent_(0.4)
        for run in runs:
            attrs = {
                NSFontAttributeName: _font_for(run.style),
                NSForegroundColorAttributeName: _color_for(run),
            }
            if run.highlight:
                attrs[NSBackgroundColorAttributeName] = highlight
            if run.link:
                attrs[NSLinkAttributeName] = run.link
            out.appendAttributedString_(NSAttributedString.alloc().initWithString_attributes_(run.text, attrs))
        return out

    def _label(frame, text="", size=12.0, bold=False):
        field = NSTextField.alloc().initWithFrame_(frame)
        field.setBezeled_(False)
        field.setDrawsBackground_(False)
        field.setEditable_(False)
        field.setSelectable_(False)
        field.setFont_(NSFont.boldSystemFontOfSize_(size) if bold else NSFont.systemFontOfSize_(size))
        field.setStringValue_(text)
        return field

    class CheatSheetController(NSObject):
        """
        Popover content:
          - Header: app title + "N results"
          - Search field (continuous, feeds the debounced view model)
          - Scrollable text view with sections; header lines toggle, "Copy" links copy
          - Footer: shortcut hint + catalog stats
        """

        def initWithViewModel_config_(self, vm, config):
            self = objc.super(CheatSheetController, self).init()
            if self is None:
                return None
            self._vm = vm
            self._config = config
            self._copied = set()
            self._copy_timers = {}
            self._popover = None
            self._window = None
            self._view = None
            self._search = None
            self._results = None
            self._text = None
            self._footer = None
            vm.add_listener(self._stateChanged)
            return self

        # ---- view construction ----
        @objc.python_method
        def _buildView(self):
            w = float(self._config.popover_width)
            h = float(self._config.popover_height)
            root = NSView.alloc().initWithFrame_(NSMakeRect(0, 0, w, h))
            root.setAutoresizingMask_(NSViewWidthSizable | NSViewHeightSizable)

            title = _label(NSMakeRect(16, h - 38, 300, 24), APP_NAME, size=18.0, bold=True)
            title.setAutoresizingMask_(NSViewMinYMargin)
            root.addSubview_(title)

            self._results = _label(NSMakeRect(w - 216, h - 36, 200, 20), "", size=12.0)
            self._results.setAlignment_(NSTextAlignmentRight)
            self._results.setTextColor_(NSColor.secondaryLabelColor())
            self._results.setAutoresizingMask_(NSViewMinYMargin | NSViewMinXMargin)
            root.addSubview_(self._results)

            self._search = NSSearchField.alloc().initWithFrame_(NSMakeRect(16, h - 76, w - 32, 26))
            self._search.setPlaceholderString_("Search SQL syntax...")
            self._search.setFont_(NSFont.systemFontOfSize_(14.0))
            self._search.setAutoresizingMask_(NSViewWidthSizable | NSViewMinYMargin)
            self._search.setDelegate_(self)
            try:
                self._search.setSendsSearchStringImmediately_(True)
            except Exception:
                pass
            root.addSubview_(self._search)

            scroll = NSScrollView.alloc().initWithFrame_(NSMakeRect(0, 30, w, h - 118))
            scroll.setHasVerticalScroller_(True)
            scroll.setHasHorizontalScroller_(False)
            scroll.setAutohidesScrollers_(True)
            scroll.setAutoresizingMask_(NSViewWidthSizable | NSViewHeightSizable)

            self._text = NSTextView.alloc().initWithFrame_(scroll.contentView().bounds())
            self._text.setEditable_(False)
            self._text.setSelectable_(True)
            self._text.setRichText_(True)
            self._text.setVerticallyResizable_(True)
            self._text.setHorizontallyResizable_(False)
            self._text.setAutoresizingMask_(NSViewWidthSizable)
            self._text.setTextContainerInset_((12.0, 8.0))
            try:
                self._text.setBackgroundColor_(NSColor.textBackgroundColor())
                # links keep their run colors; just show a hand cursor
                self._text.setLinkTextAttributes_({NSCursorAttributeName: NSCursor.pointingHandCursor()})
            except Exception:
                pass
            self._text.setDelegate_(self)
            scroll.setDocumentView_(self._text)
            root.addSubview_(scroll)

            hint = _label(NSMakeRect(16, 6, 200, 18), "⌘F to search", size=11.0)
            hint.setTextColor_(NSColor.secondaryLabelColor())
            hint.setAutoresizingMask_(NSViewMaxYMargin)
            root.addSubview_(hint)

            self._footer = _label(NSMakeRect(w - 316, 6, 300, 18), self._vm.footer_label(), size=11.0)
            self._footer.setAlignment_(NSTextAlignmentRight)
            self._footer.setTextColor_(NSColor.secondaryLabelColor())
            self._footer.setAutoresizingMask_(NSViewMaxYMargin | NSViewMinXMargin)
            root.addSubview_(self._footer)

            self._view = root
            self.render()
            return root

        @objc.python_method
        def _ensurePopover(self):
            if self._popover is not None:
                return self._popover
            vc = NSViewController.alloc().init()
            vc.setView_(self._view or self._buildView())
            popover = NSPopover.alloc().init()
            popover.setContentSize_((float(self._config.popover_width), float(self._config.popover_height)))
            popover.setBehavior_(POPOVER_BEHAVIOR_TRANSIENT)
            popover.setContentViewController_(vc)
            self._popover = popover
            return popover

        # ---- show / hide ----
        @objc.python_method
        def isShown(self):
            if self._popover is not None and self._popover.isShown():
                return True
            return self._window is not None and self._window.isVisible()

        @objc.python_method
        def showRelativeTo(self, button):
            if button is None:
                self._showWindow()
            else:
                try:
                    popover = self._ensurePopover()
                    popover.showRelativeToRect_ofView_preferredEdge_(button.bounds(), button, POPOVER_EDGE_MIN_Y)
                except Exception:
                    logging.exception("Popover show failed, using a window")
                    self._showWindow()
            try:
                NSApp.activateIgnoringOtherApps_(True)
            except Exception:
                pass
            self.focusSearch()

        @objc.python_method
        def _showWindow(self):
            if self._window is None:
                rect = NSMakeRect(200.0, 200.0, float(self._config.popover_width), float(self._config.popover_height))
                style_mask = 15  # titled, closable, resizable, miniaturizable
                self._window = NSWindow.alloc().initWithContentRect_styleMask_backing_defer_(
                    rect, style_mask, NSBackingStoreBuffered, False
                )
                self._window.setTitle_(APP_NAME)
                self._window.setReleasedWhenClosed_(False)
                if self._view is not None and self._view.superview() is not None:
                    self._view.removeFromSuperview()
                self._window.setContentView_(self._view or self._buildView())
                self._window.center()
                GLOBAL_WINDOWS.append(self._window)
            self._window.makeKeyAndOrderFront_(None)

        @objc.python_method
        def hide(self):
            try:
                if self._popover is not None and self._popover.isShown():
                    self._popover.performClose_(None)
                if self._window is not None:
                    self._window.orderOut_(None)
            except Exception:
                logging.exception("Popover close failed")

        def focusSearch(self):
            if self._search is None:
                return
            try:
                self._search.window().makeFirstResponder_(self._search)
            except Exception:
                pass

        # ---- search field delegate ----
        def controlTextDidChange_(self, notification):
            try:
                q = str(self._search.stringValue() or "")
            except Exception:
                q = ""
            self._vm.query_changed(q)
            self._updateResultsLabel()

        def searchFieldDidEndSearching_(self, sender):
            # cancel button or the field being emptied
            self._vm.search_cleared()

        # ---- text view delegate ----
        def textView_clickedOnLink_atIndex_(self, textView, link, index):
            action, ident = parse_link(str(link))
            if action == TOGGLE:
                self._vm.section_toggled(ident)
                return True
            if action == COPY:
                self._copyExample(ident)
                return True
            return False

        @objc.python_method
        def _copyExample(self, example_id):
            example = self._vm.catalog.find_example(example_id)
            if example is None:
                logging.warning("Copy requested for unknown example %s", example_id)
                return
            if not copy_to_clipboard(example.code):
                rumps.notification(APP_NAME, "Copy failed", "Clipboard is not available.")
                return
            logging.debug("Copied example %s (%d chars)", example_id, len(example.code))
            self._copied.add(example_id)
            old = self._copy_timers.pop(example_id, None)
            if old is not None:
                old.cancel()

            def _reset():
                self._copy_timers.pop(example_id, None)
                self._copied.discard(example_id)
                self.render()

            self._copy_timers[example_id] = DelayedCall(self._config.copy_feedback_seconds, _reset, AppHelper.callLater)
            self.render()

        # ---- rendering ----
        @objc.python_method
        def _stateChanged(self, vm):
            self.render()

        @objc.python_method
        def _updateResultsLabel(self):
            if self._results is not None:
                self._results.setStringValue_(self._vm.results_label())

        @objc.python_method
        def render(self):
            if self._text is None:
                return
            try:
                runs = render_sections(self._vm, copied=self._copied)
                self._text.textStorage().setAttributedString_(attributed_from_runs(runs))
            except Exception:
                logging.exception("Render failed")
            self._updateResultsLabel()


# ---------------- UI (rumps menu) ----------------
class SQLWidgetApp(rumps.App):
    def __init__(self, config: Config):
        super().__init__(APP_NAME, title=STATUS_TITLE, quit_button=None)
        self.config = config
        self.catalog = build_catalog()
        self.view_model = SearchViewModel(self.catalog, debounce_seconds=config.debounce_seconds,
                                          scheduler=main_loop_scheduler())
        self.controller = None
        if PYOBJC_AVAILABLE:
            self.controller = CheatSheetController.alloc().initWithViewModel_config_(self.view_model, config)
        self.menu = [
            rumps.MenuItem("Open SQL Cheat Sheet"),
            rumps.MenuItem("View Log"),
            None,
            rumps.MenuItem("Quit"),
        ]
        if config.hotkey_enabled:
            self._install_global_hotkey()
        logging.info("Catalog loaded: %s", self.view_model.footer_label())

    def _status_button(self):
        # rumps keeps the NSStatusItem on its NSApp delegate once the app runs
        try:
            return self._nsapp.nsstatusitem.button()
        except Exception:
            return None

    def _install_global_hotkey(self):
        """
        Option + Space toggles the cheat sheet from anywhere; Command + F focuses
        the search field while it is open.
        """
        if not PYOBJC_AVAILABLE:
            return
        try:
            from AppKit import NSEventModifierFlagOption as _OPT_FLAG, NSEventModifierFlagCommand as _CMD_FLAG
        except Exception:
            try:
                from AppKit import NSAlternateKeyMask as _OPT_FLAG, NSCommandKeyMask as _CMD_FLAG  # legacy
            except Exception:
                _OPT_FLAG, _CMD_FLAG = 0x00080000, 0x00100000

        def _is_combo(event, flag, keycode, char):
            try:
                flags = int(event.modifierFlags())
                code = int(event.keyCode())
                chars = str(event.charactersIgnoringModifiers() or "")
                return bool(flags & flag) and (code == keycode or chars.lower() == char)
            except Exception:
                return False

        def _handle_global(event):
            if _is_combo(event, _OPT_FLAG, KEYCODE_SPACE, " "):
                AppHelper.callAfter(self.toggle_cheat_sheet, None)

        def _handle_local(event):
            if _is_combo(event, _CMD_FLAG, KEYCODE_F, "f") and self.controller and self.controller.isShown():
                self.controller.focusSearch()
                return None
            _handle_global(event)
            return event

        try:
            self._hotkey_global = NSEvent.addGlobalMonitorForEventsMatchingMask_handler_(
                NSEventMaskKeyDown, _handle_global
            )
            self._hotkey_local = NSEvent.addLocalMonitorForEventsMatchingMask_handler_(
                NSEventMaskKeyDown, _handle_local
            )
        except Exception:
            logging.exception("Hotkey install failed")
            rumps.notification(APP_NAME, "Hotkey unavailable",
                               "Enable Accessibility for Python/Terminal, then restart.")

    def toggle_cheat_sheet(self, _=None):
        if self.controller is None:
            self._show_plain_text()
            return
        if self.controller.isShown():
            self.controller.hide()
        else:
            self.controller.showRelativeTo(self._status_button())

    def _show_plain_text(self):
        # no PyObjC: plain-text dump of the current view
        body = runs_to_text(render_sections(self.view_model))
        rumps.alert(APP_NAME, body[:4000])

    @rumps.clicked("Open SQL Cheat Sheet")
    def open_cheat_sheet(self, _):
        self.toggle_cheat_sheet()

    @rumps.clicked("View Log")
    def view_log(self, _):
        log_file = self.config.log_file
        if os.path.exists(log_file):
            if sys.platform == "darwin":
                subprocess.run(["open", os.path.abspath(log_file)], check=False)
            else:
                with open(log_file, "r", encoding="utf-8") as f:
                    content = f.read()[-4000:]
                rumps.alert("Log (tail)", content[:2000])
        else:
            rumps.notification(APP_NAME, "View Log", "No log file yet.")

    @rumps.clicked("Quit")
    def quit_app(self, _):
        if self.controller is not None:
            self.controller.hide()
        rumps.quit_application()


# ---------------- Run ----------------
def main():
    config = load_config()
    setup_logging(config)
    logging.info("PyObjC available: %s  debounce: %dms  log: %s",
                 PYOBJC_AVAILABLE, config.debounce_ms, config.log_file)
    if PYOBJC_AVAILABLE:
        # menubar-only, no Dock icon
        app = NSApplication.sharedApplication()
        app.setActivationPolicy_(NSApplicationActivationPolicyAccessory)
    SQLWidgetApp(config).run()


if __name__ == "__main__":
    main()

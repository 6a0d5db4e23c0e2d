"""Workbench color table for VS Code themes.

COLOR_TABLE pairs every output key with a deriver: a small function of the
ExtendedPalette. Derivers are built from the factories below, e.g.

    ("editor.background", level(CANVAS))
    ("editor.selectionBackground", alpha("accent", 0.26))
    ("terminal.ansiRed", role("red"))

Grouping comments only organize the table; it is evaluated in one pass.
"""

from ..color import blend, is_hex_color, shade_toward_black
from ..errors import ThemeAssemblyError, ThemeValidationError
from ..opacity import with_alpha

TRANSPARENT = "#00000000"

# Background hierarchy levels
CANVAS = 0
RAISED = 1
INPUT = 2
HOVER = 3
OVERLAY = 4

# Opacity steps
FAINT = 0.03
SUBTLE = 0.06
LIGHT = 0.08
SOFT = 0.125
MEDIUM = 0.19
STRONG = 0.25
SELECTION = 0.26
HEAVY = 0.38
HALF = 0.5
DENSE = 0.63


def role(ref):
    return lambda palette: palette.resolve(ref)


def alpha(ref, opacity):
    return lambda palette: with_alpha(palette.resolve(ref), opacity)


def level(index):
    return lambda palette: palette.level(index)


def shade(ref, amount):
    return lambda palette: shade_toward_black(palette.resolve(ref), amount)


def mix(ref1, ref2, ratio=0.5):
    return lambda palette: blend(palette.resolve(ref1), palette.resolve(ref2), ratio)


def shadow(opacity):
    """Canvas pushed most of the way to black, at ``opacity``."""
    return lambda palette: with_alpha(shade_toward_black(palette.background, 0.6), opacity)


def fixed(value):
    return lambda palette: value


COLOR_TABLE = (
    # Base
    ("focusBorder", alpha("accent", HALF)),
    ("foreground", role("chrome_foreground")),
    ("disabledForeground", alpha("dim", HALF)),
    ("descriptionForeground", role("dim")),
    ("errorForeground", role("red")),
    ("icon.foreground", role("chrome_foreground")),
    ("selection.background", alpha("accent", HEAVY)),
    ("widget.border", alpha("bright_black", STRONG)),
    ("widget.shadow", shadow(HALF)),
    ("sash.hoverBorder", role("accent")),
    ("textLink.foreground", role("blue")),
    ("textLink.activeForeground", role("blue.light")),
    ("textBlockQuote.background", level(RAISED)),
    ("textBlockQuote.border", role("accent")),
    ("textCodeBlock.background", level(RAISED)),
    ("textPreformat.foreground", role("yellow")),
    ("textSeparator.foreground", alpha("bright_black", STRONG)),
    # Editor core
    ("editor.background", level(CANVAS)),
    ("editor.foreground", role("foreground")),
    ("editorLineNumber.foreground", alpha("bright_black", STRONG)),
    ("editorLineNumber.activeForeground", role("foreground")),
    ("editorCursor.foreground", role("cursor")),
    ("editorCursor.background", role("cursor_text")),
    ("editor.placeholder.foreground", alpha("dim", HALF)),
    ("editor.foldBackground", alpha("accent", SUBTLE)),
    ("editor.linkedEditingBackground", alpha("accent", SOFT)),
    # Selections and highlights
    ("editor.selectionBackground", alpha("accent", SELECTION)),
    ("editor.selectionForeground", role("selection_foreground")),
    ("editor.selectionHighlightBackground", alpha("accent", SOFT)),
    ("editor.selectionHighlightBorder", fixed(TRANSPARENT)),
    ("editor.inactiveSelectionBackground", alpha("accent", LIGHT)),
    ("editor.lineHighlightBackground", alpha("foreground", FAINT)),
    ("editor.lineHighlightBorder", fixed(TRANSPARENT)),
    ("editor.wordHighlightBackground", alpha("blue", SOFT)),
    ("editor.wordHighlightStrongBackground", alpha("blue", MEDIUM)),
    ("editor.wordHighlightTextBackground", alpha("blue", SOFT)),
    ("editor.wordHighlightBorder", fixed(TRANSPARENT)),
    ("editor.wordHighlightStrongBorder", fixed(TRANSPARENT)),
    ("editor.hoverHighlightBackground", alpha("bright_black", HEAVY)),
    # Find & search
    ("editor.findMatchBackground", alpha("yellow", STRONG)),
    ("editor.findMatchHighlightBackground", alpha("yellow", 0.15)),
    ("editor.findRangeHighlightBackground", alpha("yellow", LIGHT)),
    ("editor.findMatchBorder", role("yellow")),
    ("editor.findMatchHighlightBorder", fixed(TRANSPARENT)),
    ("editor.rangeHighlightBackground", alpha("yellow", SOFT)),
    ("searchEditor.findMatchBackground", alpha("yellow", STRONG)),
    ("searchEditor.textInputBorder", alpha("bright_black", STRONG)),
    ("search.resultsInfoForeground", role("dim")),
    # Brackets & guides
    ("editorBracketMatch.background", alpha("bright_black", MEDIUM)),
    ("editorBracketMatch.border", alpha("bright_black", 0.31)),
    ("editorBracketHighlight.foreground1", role("cyan")),
    ("editorBracketHighlight.foreground2", role("purple")),
    ("editorBracketHighlight.foreground3", role("yellow")),
    ("editorBracketHighlight.foreground4", role("blue")),
    ("editorBracketHighlight.foreground5", role("green")),
    ("editorBracketHighlight.foreground6", role("bright_red")),
    ("editorBracketHighlight.unexpectedBracket.foreground", role("red")),
    ("editorBracketPairGuide.activeBackground1", alpha("cyan", HALF)),
    ("editorBracketPairGuide.activeBackground2", alpha("purple", HALF)),
    ("editorBracketPairGuide.activeBackground3", alpha("yellow", HALF)),
    ("editorBracketPairGuide.activeBackground4", alpha("blue", HALF)),
    ("editorBracketPairGuide.activeBackground5", alpha("green", HALF)),
    ("editorBracketPairGuide.activeBackground6", alpha("bright_red", HALF)),
    ("editorIndentGuide.background1", alpha("bright_black", 0.10)),
    ("editorIndentGuide.background2", alpha("bright_black", 0.12)),
    ("editorIndentGuide.background3", alpha("bright_black", 0.14)),
    ("editorIndentGuide.background4", alpha("bright_black", 0.16)),
    ("editorIndentGuide.background5", alpha("bright_black", 0.18)),
    ("editorIndentGuide.background6", alpha("bright_black", 0.20)),
    ("editorIndentGuide.activeBackground1", alpha("bright_black", 0.21)),
    ("editorIndentGuide.activeBackground2", alpha("bright_black", 0.23)),
    ("editorIndentGuide.activeBackground3", alpha("bright_black", 0.25)),
    ("editorIndentGuide.activeBackground4", alpha("bright_black", 0.27)),
    ("editorIndentGuide.activeBackground5", alpha("bright_black", 0.29)),
    ("editorIndentGuide.activeBackground6", alpha("bright_black", 0.31)),
    ("editorRuler.foreground", alpha("bright_black", SOFT)),
    ("editorWhitespace.foreground", alpha("bright_black", SOFT)),
    ("editorLink.activeForeground", role("blue")),
    ("editorUnnecessaryCode.opacity", fixed("#000000aa")),
    # Editor widgets
    ("editorWidget.background", level(RAISED)),
    ("editorWidget.foreground", role("foreground")),
    ("editorWidget.border", alpha("bright_black", STRONG)),
    ("editorWidget.resizeBorder", alpha("bright_black", STRONG)),
    ("editorSuggestWidget.background", level(RAISED)),
    ("editorSuggestWidget.border", alpha("bright_black", STRONG)),
    ("editorSuggestWidget.foreground", role("foreground")),
    ("editorSuggestWidget.highlightForeground", role("yellow")),
    ("editorSuggestWidget.selectedBackground", alpha("accent", SOFT)),
    ("editorSuggestWidget.selectedForeground", role("foreground")),
    ("editorSuggestWidget.focusHighlightForeground", role("yellow")),
    ("editorSuggestWidget.selectedIconForeground", role("yellow")),
    ("editorSuggestWidgetStatus.foreground", role("dim")),
    ("editorHoverWidget.background", level(RAISED)),
    ("editorHoverWidget.border", alpha("bright_black", STRONG)),
    ("editorHoverWidget.foreground", role("foreground")),
    ("editorHoverWidget.highlightForeground", role("yellow")),
    ("editorHoverWidget.statusBarBackground", level(INPUT)),
    ("editorStickyScroll.background", role("ui_background")),
    ("editorStickyScroll.shadow", shadow(STRONG)),
    ("editorStickyScrollHover.background", level(HOVER)),
    ("editorGhostText.background", fixed(TRANSPARENT)),
    ("editorGhostText.foreground", alpha("bright_black", HEAVY)),
    ("editorGhostText.border", fixed(TRANSPARENT)),
    ("editorCodeLens.foreground", alpha("bright_black", HEAVY)),
    ("editorLightBulb.foreground", role("yellow")),
    ("editorLightBulbAutoFix.foreground", role("blue")),
    ("editorLightBulbAi.foreground", role("purple")),
    ("editorInlayHint.background", alpha("bright_black", SOFT)),
    ("editorInlayHint.foreground", alpha("dim", HALF)),
    ("editorInlayHint.typeForeground", alpha("dim", HALF)),
    ("editorInlayHint.typeBackground", alpha("bright_black", SOFT)),
    ("editorInlayHint.parameterForeground", alpha("dim", HALF)),
    ("editorInlayHint.parameterBackground", alpha("bright_black", SOFT)),
    # Diagnostics
    ("editorError.foreground", role("red")),
    ("editorError.background", alpha("red", SOFT)),
    ("editorError.border", fixed(TRANSPARENT)),
    ("editorWarning.foreground", role("yellow")),
    ("editorWarning.background", alpha("yellow", SOFT)),
    ("editorWarning.border", fixed(TRANSPARENT)),
    ("editorInfo.foreground", role("blue")),
    ("editorInfo.background", alpha("blue", SOFT)),
    ("editorInfo.border", fixed(TRANSPARENT)),
    ("editorHint.foreground", role("green")),
    ("editorHint.border", fixed(TRANSPARENT)),
    ("problemsErrorIcon.foreground", role("red")),
    ("problemsWarningIcon.foreground", role("yellow")),
    ("problemsInfoIcon.foreground", role("blue")),
    # Gutter
    ("editorGutter.background", level(CANVAS)),
    ("editorGutter.modifiedBackground", role("yellow")),
    ("editorGutter.addedBackground", role("green")),
    ("editorGutter.deletedBackground", role("red")),
    ("editorGutter.foldingControlForeground", alpha("bright_black", HEAVY)),
    ("editorGutter.commentRangeForeground", alpha("bright_black", HEAVY)),
    # Diff editor
    ("diffEditor.insertedTextBackground", alpha("green", SOFT)),
    ("diffEditor.insertedTextBorder", fixed(TRANSPARENT)),
    ("diffEditor.removedTextBackground", alpha("red", SOFT)),
    ("diffEditor.removedTextBorder", fixed(TRANSPARENT)),
    ("diffEditor.border", alpha("bright_black", STRONG)),
    ("diffEditor.diagonalFill", alpha("bright_black", SOFT)),
    ("diffEditor.insertedLineBackground", alpha("green", LIGHT)),
    ("diffEditor.removedLineBackground", alpha("red", LIGHT)),
    ("diffEditorGutter.insertedLineBackground", alpha("green", MEDIUM)),
    ("diffEditorGutter.removedLineBackground", alpha("red", MEDIUM)),
    ("diffEditorOverview.insertedForeground", alpha("green", HALF)),
    ("diffEditorOverview.removedForeground", alpha("red", HALF)),
    ("merge.currentHeaderBackground", alpha("green", HALF)),
    ("merge.currentContentBackground", alpha("green", SOFT)),
    ("merge.incomingHeaderBackground", alpha("blue", HALF)),
    ("merge.incomingContentBackground", alpha("blue", SOFT)),
    ("merge.commonHeaderBackground", alpha("bright_black", HALF)),
    ("merge.commonContentBackground", alpha("bright_black", SOFT)),
    # Overview ruler
    ("editorOverviewRuler.border", fixed(TRANSPARENT)),
    ("editorOverviewRuler.background", level(CANVAS)),
    ("editorOverviewRuler.findMatchForeground", alpha("yellow", HALF)),
    ("editorOverviewRuler.rangeHighlightForeground", alpha("yellow", HEAVY)),
    ("editorOverviewRuler.selectionHighlightForeground", alpha("accent", HEAVY)),
    ("editorOverviewRuler.wordHighlightForeground", alpha("blue", HEAVY)),
    ("editorOverviewRuler.wordHighlightStrongForeground", alpha("blue", HALF)),
    ("editorOverviewRuler.modifiedForeground", alpha("yellow", HALF)),
    ("editorOverviewRuler.addedForeground", alpha("green", HALF)),
    ("editorOverviewRuler.deletedForeground", alpha("red", HALF)),
    ("editorOverviewRuler.errorForeground", alpha("red", HALF)),
    ("editorOverviewRuler.warningForeground", alpha("yellow", HALF)),
    ("editorOverviewRuler.infoForeground", alpha("blue", HALF)),
    ("editorOverviewRuler.bracketMatchForeground", alpha("bright_black", HEAVY)),
    # Activity bar
    ("activityBar.background", role("ui_background")),
    ("activityBar.foreground", role("chrome_foreground")),
    ("activityBar.inactiveForeground", alpha("dim", HALF)),
    ("activityBar.border", fixed(TRANSPARENT)),
    ("activityBar.activeBorder", role("accent")),
    ("activityBar.activeBackground", alpha("accent", LIGHT)),
    ("activityBar.activeFocusBorder", role("accent")),
    ("activityBar.dropBorder", role("accent")),
    ("activityBarBadge.background", role("accent")),
    ("activityBarBadge.foreground", role("background")),
    ("activityBarTop.foreground", role("chrome_foreground")),
    ("activityBarTop.inactiveForeground", alpha("dim", HALF)),
    ("activityBarTop.activeBorder", role("accent")),
    # Sidebar
    ("sideBar.background", role("ui_background")),
    ("sideBar.foreground", role("chrome_foreground")),
    ("sideBar.border", fixed(TRANSPARENT)),
    ("sideBar.dropBackground", alpha("accent", SOFT)),
    ("sideBarTitle.foreground", role("chrome_foreground")),
    ("sideBarSectionHeader.background", shade("ui_background", 0.1)),
    ("sideBarSectionHeader.foreground", role("chrome_foreground")),
    ("sideBarSectionHeader.border", fixed(TRANSPARENT)),
    ("sideBarStickyScroll.background", role("ui_background")),
    ("sideBarStickyScroll.shadow", shadow(STRONG)),
    # Lists & trees
    ("list.activeSelectionBackground", alpha("accent", SOFT)),
    ("list.activeSelectionForeground", role("chrome_foreground")),
    ("list.activeSelectionIconForeground", role("foreground")),
    ("list.inactiveSelectionBackground", alpha("accent", LIGHT)),
    ("list.inactiveSelectionForeground", role("chrome_foreground")),
    ("list.inactiveSelectionIconForeground", role("foreground")),
    ("list.hoverBackground", alpha("bright_black", SOFT)),
    ("list.hoverForeground", role("chrome_foreground")),
    ("list.focusBackground", alpha("accent", SOFT)),
    ("list.focusForeground", role("chrome_foreground")),
    ("list.focusHighlightForeground", role("yellow")),
    ("list.focusOutline", alpha("accent", STRONG)),
    ("list.focusAndSelectionOutline", alpha("accent", HEAVY)),
    ("list.highlightForeground", role("yellow")),
    ("list.dropBackground", alpha("accent", SOFT)),
    ("list.deemphasizedForeground", alpha("dim", HALF)),
    ("list.errorForeground", role("red")),
    ("list.warningForeground", role("yellow")),
    ("list.invalidItemForeground", role("bright_red")),
    ("listFilterWidget.background", level(HOVER)),
    ("listFilterWidget.outline", role("accent")),
    ("listFilterWidget.noMatchesOutline", role("red")),
    ("listFilterWidget.shadow", shadow(STRONG)),
    ("tree.indentGuidesStroke", alpha("bright_black", STRONG)),
    ("tree.inactiveIndentGuidesStroke", alpha("bright_black", SOFT)),
    ("tree.tableColumnsBorder", alpha("bright_black", SOFT)),
    ("tree.tableOddRowsBackground", alpha("bright_black", FAINT)),
    # Tabs & editor groups
    ("tab.activeBackground", level(CANVAS)),
    ("tab.activeForeground", role("chrome_foreground")),
    ("tab.border", fixed(TRANSPARENT)),
    ("tab.activeBorder", fixed(TRANSPARENT)),
    ("tab.activeBorderTop", role("accent")),
    ("tab.inactiveBackground", role("ui_background")),
    ("tab.inactiveForeground", alpha("dim", HALF)),
    ("tab.hoverBackground", level(HOVER)),
    ("tab.hoverForeground", role("chrome_foreground")),
    ("tab.hoverBorder", fixed(TRANSPARENT)),
    ("tab.unfocusedActiveBackground", level(CANVAS)),
    ("tab.unfocusedActiveForeground", alpha("foreground", DENSE)),
    ("tab.unfocusedActiveBorderTop", alpha("accent", HEAVY)),
    ("tab.unfocusedInactiveBackground", role("ui_background")),
    ("tab.unfocusedInactiveForeground", alpha("dim", HEAVY)),
    ("tab.unfocusedHoverBackground", level(HOVER)),
    ("tab.unfocusedHoverForeground", role("foreground")),
    ("tab.unfocusedHoverBorder", fixed(TRANSPARENT)),
    ("tab.activeModifiedBorder", role("yellow")),
    ("tab.inactiveModifiedBorder", alpha("yellow", HEAVY)),
    ("tab.unfocusedActiveModifiedBorder", alpha("yellow", HALF)),
    ("tab.unfocusedInactiveModifiedBorder", alpha("yellow", STRONG)),
    ("tab.lastPinnedBorder", alpha("bright_black", STRONG)),
    ("editorGroupHeader.tabsBackground", role("ui_background")),
    ("editorGroupHeader.tabsBorder", fixed(TRANSPARENT)),
    ("editorGroupHeader.noTabsBackground", role("ui_background")),
    ("editorGroupHeader.border", fixed(TRANSPARENT)),
    ("editorGroup.border", alpha("bright_black", STRONG)),
    ("editorGroup.dropBackground", alpha("accent", SOFT)),
    ("editorGroup.emptyBackground", level(CANVAS)),
    ("editorGroup.focusedEmptyBorder", role("accent")),
    ("editorGroup.dropIntoPromptBackground", level(RAISED)),
    ("editorGroup.dropIntoPromptForeground", role("foreground")),
    ("editorGroup.dropIntoPromptBorder", alpha("bright_black", STRONG)),
    ("editorPane.background", level(CANVAS)),
    # Breadcrumbs
    ("breadcrumb.foreground", alpha("dim", HALF)),
    ("breadcrumb.background", level(CANVAS)),
    ("breadcrumb.focusForeground", role("foreground")),
    ("breadcrumb.activeSelectionForeground", role("foreground")),
    ("breadcrumbPicker.background", level(RAISED)),
    # Scrollbar
    ("scrollbar.shadow", shadow(STRONG)),
    ("scrollbarSlider.background", alpha("bright_black", SOFT)),
    ("scrollbarSlider.hoverBackground", alpha("bright_black", STRONG)),
    ("scrollbarSlider.activeBackground", alpha("bright_black", HEAVY)),
    # Minimap
    ("minimap.background", level(CANVAS)),
    ("minimap.findMatchHighlight", alpha("yellow", HEAVY)),
    ("minimap.selectionHighlight", alpha("accent", STRONG)),
    ("minimap.selectionOccurrenceHighlight", alpha("accent", HEAVY)),
    ("minimap.errorHighlight", alpha("red", HALF)),
    ("minimap.warningHighlight", alpha("yellow", HALF)),
    ("minimap.foregroundOpacity", fixed("#000000a0")),
    ("minimapSlider.background", alpha("bright_black", SOFT)),
    ("minimapSlider.hoverBackground", alpha("bright_black", MEDIUM)),
    ("minimapSlider.activeBackground", alpha("bright_black", STRONG)),
    ("minimapGutter.addedBackground", role("green")),
    ("minimapGutter.modifiedBackground", role("yellow")),
    ("minimapGutter.deletedBackground", role("red")),
    # Inputs
    ("input.background", level(INPUT)),
    ("input.border", alpha("bright_black", STRONG)),
    ("input.foreground", role("chrome_foreground")),
    ("input.placeholderForeground", alpha("dim", HALF)),
    ("inputOption.activeBackground", alpha("accent", MEDIUM)),
    ("inputOption.activeBorder", role("accent")),
    ("inputOption.activeForeground", role("foreground")),
    ("inputOption.hoverBackground", alpha("bright_black", SOFT)),
    ("inputValidation.errorBackground", level(INPUT)),
    ("inputValidation.errorBorder", role("red")),
    ("inputValidation.errorForeground", role("red")),
    ("inputValidation.infoBackground", level(INPUT)),
    ("inputValidation.infoBorder", role("blue")),
    ("inputValidation.infoForeground", role("blue")),
    ("inputValidation.warningBackground", level(INPUT)),
    ("inputValidation.warningBorder", role("yellow")),
    ("inputValidation.warningForeground", role("yellow")),
    # Dropdown
    ("dropdown.background", level(INPUT)),
    ("dropdown.listBackground", level(RAISED)),
    ("dropdown.border", alpha("bright_black", STRONG)),
    ("dropdown.foreground", role("chrome_foreground")),
    # Buttons
    ("button.background", role("accent")),
    ("button.foreground", role("background")),
    ("button.hoverBackground", role("accent.light")),
    ("button.secondaryBackground", alpha("bright_black", STRONG)),
    ("button.secondaryForeground", role("foreground")),
    ("button.secondaryHoverBackground", alpha("bright_black", HEAVY)),
    ("button.border", fixed(TRANSPARENT)),
    ("button.separator", alpha("background", STRONG)),
    # Checkbox & radio
    ("checkbox.background", level(INPUT)),
    ("checkbox.foreground", role("chrome_foreground")),
    ("checkbox.border", alpha("bright_black", STRONG)),
    ("checkbox.selectBackground", role("accent")),
    ("checkbox.selectBorder", fixed(TRANSPARENT)),
    ("radio.activeBackground", alpha("accent", MEDIUM)),
    ("radio.activeBorder", role("accent")),
    ("radio.activeForeground", role("foreground")),
    ("radio.inactiveBorder", alpha("bright_black", STRONG)),
    ("radio.inactiveHoverBackground", alpha("bright_black", SOFT)),
    # Status bar
    ("statusBar.background", role("ui_background")),
    ("statusBar.foreground", role("chrome_foreground")),
    ("statusBar.border", fixed(TRANSPARENT)),
    ("statusBar.focusBorder", role("accent")),
    ("statusBar.debuggingBackground", role("accent")),
    ("statusBar.debuggingForeground", role("background")),
    ("statusBar.debuggingBorder", fixed(TRANSPARENT)),
    ("statusBar.noFolderBackground", role("ui_background")),
    ("statusBar.noFolderForeground", role("foreground")),
    ("statusBar.noFolderBorder", fixed(TRANSPARENT)),
    ("statusBarItem.activeBackground", alpha("accent", SOFT)),
    ("statusBarItem.hoverBackground", alpha("bright_black", SOFT)),
    ("statusBarItem.hoverForeground", role("foreground")),
    ("statusBarItem.prominentForeground", role("foreground")),
    ("statusBarItem.prominentBackground", fixed(TRANSPARENT)),
    ("statusBarItem.prominentHoverBackground", alpha("bright_black", SOFT)),
    ("statusBarItem.prominentHoverForeground", role("foreground")),
    ("statusBarItem.remoteBackground", role("blue")),
    ("statusBarItem.remoteForeground", role("background")),
    ("statusBarItem.remoteHoverBackground", role("cyan")),
    ("statusBarItem.remoteHoverForeground", role("background")),
    ("statusBarItem.errorBackground", role("red")),
    ("statusBarItem.errorForeground", role("background")),
    ("statusBarItem.errorHoverBackground", role("bright_red")),
    ("statusBarItem.errorHoverForeground", role("background")),
    ("statusBarItem.warningBackground", role("yellow")),
    ("statusBarItem.warningForeground", role("background")),
    ("statusBarItem.warningHoverBackground", role("bright_yellow")),
    ("statusBarItem.warningHoverForeground", role("background")),
    ("statusBarItem.offlineBackground", role("bright_black")),
    ("statusBarItem.offlineForeground", role("background")),
    ("statusBarItem.compactHoverBackground", alpha("bright_black", SOFT)),
    ("statusBarItem.focusBorder", role("accent")),
    # Title bar
    ("titleBar.activeBackground", role("ui_background")),
    ("titleBar.activeForeground", role("chrome_foreground")),
    ("titleBar.inactiveBackground", role("ui_background")),
    ("titleBar.inactiveForeground", alpha("dim", HALF)),
    ("titleBar.border", fixed(TRANSPARENT)),
    # Menus
    ("menubar.selectionForeground", role("chrome_foreground")),
    ("menubar.selectionBackground", alpha("accent", SOFT)),
    ("menubar.selectionBorder", fixed(TRANSPARENT)),
    ("menu.foreground", role("chrome_foreground")),
    ("menu.background", level(RAISED)),
    ("menu.selectionForeground", role("chrome_foreground")),
    ("menu.selectionBackground", alpha("accent", SOFT)),
    ("menu.selectionBorder", fixed(TRANSPARENT)),
    ("menu.separatorBackground", alpha("bright_black", STRONG)),
    ("menu.border", alpha("bright_black", STRONG)),
    # Command center
    ("commandCenter.foreground", role("chrome_foreground")),
    ("commandCenter.activeForeground", role("chrome_foreground")),
    ("commandCenter.background", level(INPUT)),
    ("commandCenter.activeBackground", alpha("bright_black", SOFT)),
    ("commandCenter.border", alpha("bright_black", STRONG)),
    ("commandCenter.inactiveForeground", alpha("dim", HALF)),
    ("commandCenter.inactiveBorder", alpha("bright_black", SOFT)),
    ("commandCenter.activeBorder", role("accent")),
    ("commandCenter.debuggingBackground", alpha("accent", STRONG)),
    # Notifications & banner
    ("notificationCenter.border", alpha("bright_black", STRONG)),
    ("notificationCenterHeader.foreground", role("chrome_foreground")),
    ("notificationCenterHeader.background", level(HOVER)),
    ("notificationToast.border", alpha("bright_black", STRONG)),
    ("notifications.foreground", role("chrome_foreground")),
    ("notifications.background", level(OVERLAY)),
    ("notifications.border", alpha("bright_black", STRONG)),
    ("notificationLink.foreground", role("blue")),
    ("notificationsErrorIcon.foreground", role("red")),
    ("notificationsWarningIcon.foreground", role("yellow")),
    ("notificationsInfoIcon.foreground", role("blue")),
    ("banner.background", level(RAISED)),
    ("banner.foreground", role("chrome_foreground")),
    ("banner.iconForeground", role("blue")),
    # Quick input
    ("pickerGroup.border", alpha("bright_black", STRONG)),
    ("pickerGroup.foreground", role("blue")),
    ("quickInput.background", level(OVERLAY)),
    ("quickInput.foreground", role("chrome_foreground")),
    ("quickInputList.focusBackground", alpha("accent", SOFT)),
    ("quickInputList.focusForeground", role("chrome_foreground")),
    ("quickInputList.focusIconForeground", role("foreground")),
    ("quickInputTitle.background", level(INPUT)),
    # Keybinding labels
    ("keybindingLabel.background", alpha("bright_black", SOFT)),
    ("keybindingLabel.foreground", role("chrome_foreground")),
    ("keybindingLabel.border", alpha("bright_black", STRONG)),
    ("keybindingLabel.bottomBorder", alpha("bright_black", STRONG)),
    ("keybindingTable.headerBackground", level(RAISED)),
    ("keybindingTable.rowsBackground", alpha("bright_black", FAINT)),
    # Terminal
    ("terminal.background", level(CANVAS)),
    ("terminal.foreground", role("foreground")),
    ("terminal.ansiBlack", role("ui_background")),
    ("terminal.ansiRed", role("red")),
    ("terminal.ansiGreen", role("green")),
    ("terminal.ansiYellow", role("yellow")),
    ("terminal.ansiBlue", role("blue")),
    ("terminal.ansiMagenta", role("magenta")),
    ("terminal.ansiCyan", role("cyan")),
    ("terminal.ansiWhite", role("white")),
    ("terminal.ansiBrightBlack", role("bright_black")),
    ("terminal.ansiBrightRed", role("bright_red")),
    ("terminal.ansiBrightGreen", role("bright_green")),
    ("terminal.ansiBrightYellow", role("bright_yellow")),
    ("terminal.ansiBrightBlue", role("bright_blue")),
    ("terminal.ansiBrightMagenta", role("bright_magenta")),
    ("terminal.ansiBrightCyan", role("bright_cyan")),
    ("terminal.ansiBrightWhite", role("bright_white")),
    ("terminal.selectionBackground", alpha("selection", HALF)),
    ("terminal.selectionForeground", role("selection_foreground")),
    ("terminal.inactiveSelectionBackground", alpha("selection", STRONG)),
    ("terminal.findMatchBackground", alpha("yellow", STRONG)),
    ("terminal.findMatchHighlightBackground", alpha("yellow", 0.15)),
    ("terminal.findMatchBorder", role("yellow")),
    ("terminal.findMatchHighlightBorder", fixed(TRANSPARENT)),
    ("terminal.dropBackground", alpha("accent", SOFT)),
    ("terminal.border", alpha("bright_black", STRONG)),
    ("terminal.hoverHighlightBackground", alpha("bright_black", SOFT)),
    ("terminal.tab.activeBorder", role("accent")),
    ("terminalCursor.background", role("cursor_text")),
    ("terminalCursor.foreground", role("cursor")),
    ("terminalCommandDecoration.defaultBackground", alpha("bright_black", STRONG)),
    ("terminalCommandDecoration.successBackground", role("green")),
    ("terminalCommandDecoration.errorBackground", role("red")),
    ("terminalOverviewRuler.cursorForeground", alpha("accent", HALF)),
    ("terminalOverviewRuler.findMatchForeground", alpha("yellow", HALF)),
    ("terminalStickyScroll.background", level(RAISED)),
    # Panel
    ("panel.background", level(CANVAS)),
    ("panel.border", alpha("bright_black", STRONG)),
    ("panel.dropBorder", role("accent")),
    ("panelTitle.activeBorder", role("accent")),
    ("panelTitle.activeForeground", role("chrome_foreground")),
    ("panelTitle.inactiveForeground", alpha("dim", HALF)),
    ("panelInput.border", alpha("bright_black", STRONG)),
    ("panelSection.border", alpha("bright_black", STRONG)),
    ("panelSection.dropBackground", alpha("accent", SOFT)),
    ("panelSectionHeader.background", level(RAISED)),
    ("panelSectionHeader.foreground", role("chrome_foreground")),
    ("panelSectionHeader.border", alpha("bright_black", STRONG)),
    ("outputView.background", level(CANVAS)),
    # Badges & progress
    ("badge.background", role("accent")),
    ("badge.foreground", role("background")),
    ("progressBar.background", role("accent")),
    ("profileBadge.background", alpha("bright_black", STRONG)),
    ("profileBadge.foreground", role("chrome_foreground")),
    ("actionBar.toggledBackground", alpha("accent", SOFT)),
    ("simpleFindWidget.sashBorder", alpha("bright_black", STRONG)),
    ("ports.iconRunningProcessForeground", role("green")),
    # Debug
    ("debugToolBar.background", level(OVERLAY)),
    ("debugToolBar.border", alpha("bright_black", STRONG)),
    ("editor.stackFrameHighlightBackground", alpha("yellow", SOFT)),
    ("editor.focusedStackFrameHighlightBackground", alpha("green", SOFT)),
    ("debugIcon.breakpointForeground", role("red")),
    ("debugIcon.breakpointDisabledForeground", alpha("red", HALF)),
    ("debugIcon.startForeground", role("green")),
    ("debugIcon.pauseForeground", role("yellow")),
    ("debugIcon.stopForeground", role("red")),
    ("debugIcon.continueForeground", role("blue")),
    ("debugIcon.restartForeground", role("green")),
    ("debugIcon.stepOverForeground", role("blue")),
    ("debugIcon.stepIntoForeground", role("blue")),
    ("debugIcon.stepOutForeground", role("blue")),
    ("debugTokenExpression.name", role("blue")),
    ("debugTokenExpression.value", role("foreground")),
    ("debugTokenExpression.string", role("green")),
    ("debugTokenExpression.number", role("bright_red")),
    ("debugTokenExpression.boolean", role("purple")),
    ("debugTokenExpression.error", role("red")),
    ("debugConsole.infoForeground", role("blue")),
    ("debugConsole.warningForeground", role("yellow")),
    ("debugConsole.errorForeground", role("red")),
    ("debugConsole.sourceForeground", role("dim")),
    ("debugConsoleInputIcon.foreground", role("accent")),
    # Notebook
    ("notebook.cellBorderColor", alpha("bright_black", STRONG)),
    ("notebook.cellHoverBackground", alpha("bright_black", SUBTLE)),
    ("notebook.cellInsertionIndicator", role("accent")),
    ("notebook.cellStatusBarItemHoverBackground", alpha("bright_black", SOFT)),
    ("notebook.cellToolbarSeparator", alpha("bright_black", STRONG)),
    ("notebook.cellEditorBackground", level(RAISED)),
    ("notebook.editorBackground", level(CANVAS)),
    ("notebook.focusedCellBackground", level(RAISED)),
    ("notebook.focusedCellBorder", role("accent")),
    ("notebook.focusedEditorBorder", role("accent")),
    ("notebook.inactiveFocusedCellBorder", alpha("accent", HEAVY)),
    ("notebook.inactiveSelectedCellBorder", alpha("bright_black", STRONG)),
    ("notebook.outputContainerBackgroundColor", level(RAISED)),
    ("notebook.outputContainerBorderColor", alpha("bright_black", STRONG)),
    ("notebook.selectedCellBackground", alpha("accent", SUBTLE)),
    ("notebook.selectedCellBorder", alpha("bright_black", STRONG)),
    ("notebook.symbolHighlightBackground", alpha("yellow", SOFT)),
    ("notebookScrollbarSlider.activeBackground", alpha("bright_black", HEAVY)),
    ("notebookScrollbarSlider.background", alpha("bright_black", SOFT)),
    ("notebookScrollbarSlider.hoverBackground", alpha("bright_black", STRONG)),
    ("notebookStatusErrorIcon.foreground", role("red")),
    ("notebookStatusRunningIcon.foreground", role("blue")),
    ("notebookStatusSuccessIcon.foreground", role("green")),
    # Charts
    ("charts.foreground", role("foreground")),
    ("charts.lines", alpha("bright_black", HALF)),
    ("charts.red", role("red")),
    ("charts.blue", role("blue")),
    ("charts.yellow", role("yellow")),
    ("charts.orange", role("bright_red")),
    ("charts.green", role("green")),
    ("charts.purple", role("purple")),
    # Source control
    ("gitDecoration.addedResourceForeground", role("green")),
    ("gitDecoration.modifiedResourceForeground", role("yellow")),
    ("gitDecoration.deletedResourceForeground", role("red")),
    ("gitDecoration.renamedResourceForeground", role("blue")),
    ("gitDecoration.stageModifiedResourceForeground", role("yellow")),
    ("gitDecoration.stageDeletedResourceForeground", role("red")),
    ("gitDecoration.untrackedResourceForeground", role("green")),
    ("gitDecoration.ignoredResourceForeground", alpha("dim", HEAVY)),
    ("gitDecoration.conflictingResourceForeground", role("purple")),
    ("gitDecoration.submoduleResourceForeground", role("blue")),
    ("scmGraph.historyItemHoverLabelForeground", role("background")),
    ("scmGraph.foreground1", role("cyan")),
    ("scmGraph.foreground2", role("purple")),
    ("scmGraph.foreground3", role("yellow")),
    ("scmGraph.foreground4", role("blue")),
    ("scmGraph.foreground5", role("green")),
    # Settings editor
    ("settings.headerForeground", role("chrome_foreground")),
    ("settings.modifiedItemIndicator", role("yellow")),
    ("settings.dropdownBackground", level(INPUT)),
    ("settings.dropdownForeground", role("chrome_foreground")),
    ("settings.dropdownBorder", alpha("bright_black", STRONG)),
    ("settings.dropdownListBorder", alpha("bright_black", STRONG)),
    ("settings.textInputBackground", level(INPUT)),
    ("settings.textInputForeground", role("chrome_foreground")),
    ("settings.textInputBorder", alpha("bright_black", STRONG)),
    ("settings.numberInputBackground", level(INPUT)),
    ("settings.numberInputForeground", role("chrome_foreground")),
    ("settings.numberInputBorder", alpha("bright_black", STRONG)),
    ("settings.focusedRowBackground", alpha("bright_black", SUBTLE)),
    ("settings.focusedRowBorder", role("accent")),
    ("settings.rowHoverBackground", alpha("bright_black", SUBTLE)),
    ("settings.checkboxBackground", level(INPUT)),
    ("settings.checkboxForeground", role("chrome_foreground")),
    ("settings.checkboxBorder", alpha("bright_black", STRONG)),
    ("settings.sashBorder", alpha("bright_black", STRONG)),
    ("settings.headerBorder", alpha("bright_black", STRONG)),
    ("settings.settingsHeaderHoverForeground", role("chrome_foreground")),
    # Peek view
    ("peekView.border", role("accent")),
    ("peekViewEditor.background", level(RAISED)),
    ("peekViewEditorGutter.background", level(RAISED)),
    ("peekViewEditor.matchHighlightBackground", alpha("yellow", STRONG)),
    ("peekViewEditor.matchHighlightBorder", fixed(TRANSPARENT)),
    ("peekViewResult.background", level(HOVER)),
    ("peekViewResult.fileForeground", role("chrome_foreground")),
    ("peekViewResult.lineForeground", role("chrome_foreground")),
    ("peekViewResult.matchHighlightBackground", alpha("yellow", STRONG)),
    ("peekViewResult.selectionBackground", alpha("accent", SOFT)),
    ("peekViewResult.selectionForeground", role("chrome_foreground")),
    ("peekViewTitle.background", level(INPUT)),
    ("peekViewTitleDescription.foreground", alpha("dim", HALF)),
    ("peekViewTitleLabel.foreground", role("chrome_foreground")),
    # Symbol icons
    ("symbolIcon.classForeground", role("purple")),
    ("symbolIcon.constantForeground", role("bright_red")),
    ("symbolIcon.enumeratorForeground", role("purple")),
    ("symbolIcon.fieldForeground", role("blue")),
    ("symbolIcon.functionForeground", role("blue")),
    ("symbolIcon.interfaceForeground", role("purple")),
    ("symbolIcon.keywordForeground", role("accent")),
    ("symbolIcon.methodForeground", role("blue")),
    ("symbolIcon.moduleForeground", role("yellow")),
    ("symbolIcon.propertyForeground", role("blue")),
    ("symbolIcon.stringForeground", role("green")),
    ("symbolIcon.variableForeground", role("foreground")),
)


def table_keys(table=COLOR_TABLE):
    return tuple(key for key, _ in table)


def build_vscode_colors(palette, table=COLOR_TABLE):
    """Evaluate every deriver in ``table`` against ``palette``.

    Args:
        palette: The ExtendedPalette.
        table: Sequence of ``(key, deriver)`` pairs.

    Returns:
        dict of color key -> hex string, one entry per table row.

    Raises:
        ThemeValidationError: If the table repeats a key.
        ThemeAssemblyError: If a deriver produces something that is not a
            6- or 8-digit hex color.
    """
    colors = {}
    for key, deriver in table:
        if key in colors:
            raise ThemeValidationError(f"Duplicate color key in table: {key}", {"key": key})
        value = deriver(palette)
        if not _is_output_color(value):
            raise ThemeAssemblyError(f"Color {key} resolved to {value!r}", {"key": key, "value": value})
        colors[key] = value
    return colors


def _is_output_color(value):
    return isinstance(value, str) and value.startswith("#") and len(value) in (7, 9) and is_hex_color(value)

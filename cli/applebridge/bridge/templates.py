"""
📝 Script Registry
Every AppleScript operation the bridge can run is defined here.

Naming convention:
  <APP>_<ACTION>: operation descriptor, keyed by its `name` in OPERATIONS

Bodies run inside `on run argv`. `$param` reads a parameter, `$opt_param`
marks where an optional statement goes. Records are built with
encodeRecord() and batches joined with ":::" (see codec.py).
"""

from .scripts import Operation, Param

# ─── Notes ────────────────────────────────────────────────────────────────────
# Record layout: id, title, body

NOTES_LIST = Operation(
    name="notes_list",
    application="Notes",
    params=(),
    body="""
set theRecords to {}
tell application "Notes"
	repeat with n in notes
		set end of theRecords to my encodeRecord({id of n, name of n, body of n})
	end repeat
end tell
return my joinList(theRecords, ":::")
""",
)

NOTES_SEARCH = Operation(
    name="notes_search",
    application="Notes",
    params=(Param("query"),),
    body="""
set theQuery to $query
set theRecords to {}
tell application "Notes"
	repeat with n in notes
		if (name of n contains theQuery) or (body of n contains theQuery) then
			set end of theRecords to my encodeRecord({id of n, name of n, body of n})
		end if
	end repeat
end tell
return my joinList(theRecords, ":::")
""",
)

NOTES_GET = Operation(
    name="notes_get",
    application="Notes",
    params=(Param("title"),),
    body="""
set theTitle to $title
tell application "Notes"
	set matches to (every note whose name is theTitle)
	if (count of matches) is 0 then return ""
	set n to item 1 of matches
	return my encodeRecord({id of n, name of n, body of n})
end tell
""",
)

NOTES_CREATE = Operation(
    name="notes_create",
    application="Notes",
    params=(Param("title"), Param("body", required=False, default="")),
    body="""
tell application "Notes"
	set n to make new note with properties {name:$title, body:$body}
	return my encodeRecord({id of n, name of n, body of n})
end tell
""",
)

NOTES_EDIT = Operation(
    name="notes_edit",
    application="Notes",
    params=(Param("title"), Param("new_body", required=False, default="")),
    body="""
set theTitle to $title
tell application "Notes"
	set matches to (every note whose name is theTitle)
	if (count of matches) is 0 then return ""
	set n to item 1 of matches
	set body of n to $new_body
	return my encodeRecord({id of n, name of n, body of n})
end tell
""",
)

NOTES_DELETE = Operation(
    name="notes_delete",
    application="Notes",
    params=(Param("title"),),
    body="""
set theTitle to $title
tell application "Notes"
	set matches to (every note whose name is theTitle)
	if (count of matches) is 0 then return ""
	set n to item 1 of matches
	set theRecord to my encodeRecord({id of n, name of n, ""})
	delete n
end tell
return theRecord
""",
)

# ─── Calendar ─────────────────────────────────────────────────────────────────
# Event layout: summary, start, end, calendar[, description, location, url]
# Dates leave the script as ISO-8601 local timestamps (isoDate handler).

CALENDAR_LIST_CALENDARS = Operation(
    name="calendar_list_calendars",
    application="Calendar",
    params=(),
    body="""
set theRecords to {}
tell application "Calendar"
	repeat with c in calendars
		set end of theRecords to my encodeRecord({name of c})
	end repeat
end tell
return my joinList(theRecords, ":::")
""",
)

CALENDAR_LIST_EVENTS = Operation(
    name="calendar_list_events",
    application="Calendar",
    params=(Param("calendar"), Param("window_start", "date"), Param("window_end", "date")),
    body="""
set calendarName to $calendar
set windowStart to $window_start
set windowEnd to $window_end
set theRecords to {}
tell application "Calendar"
	tell calendar calendarName
		set filteredEvents to (every event whose start date ≥ windowStart and start date ≤ windowEnd)
		repeat with e in filteredEvents
			set end of theRecords to my encodeRecord({summary of e, my isoDate(start date of e), my isoDate(end date of e), calendarName})
		end repeat
	end tell
end tell
return my joinList(theRecords, ":::")
""",
)

CALENDAR_SEARCH_EVENTS = Operation(
    name="calendar_search_events",
    application="Calendar",
    params=(
        Param("calendar"),
        Param("query"),
        Param("window_start", "date"),
        Param("window_end", "date"),
    ),
    body="""
set calendarName to $calendar
set theQuery to $query
set windowStart to $window_start
set windowEnd to $window_end
set theRecords to {}
tell application "Calendar"
	tell calendar calendarName
		set filteredEvents to (every event whose start date ≥ windowStart and start date ≤ windowEnd)
		repeat with e in filteredEvents
			set theDescription to description of e
			if theDescription is missing value then set theDescription to ""
			if (summary of e contains theQuery) or (theDescription contains theQuery) then
				set end of theRecords to my encodeRecord({summary of e, my isoDate(start date of e), my isoDate(end date of e), calendarName})
			end if
		end repeat
	end tell
end tell
return my joinList(theRecords, ":::")
""",
)

CALENDAR_GET_EVENT = Operation(
    name="calendar_get_event",
    application="Calendar",
    params=(Param("calendar"), Param("title")),
    body="""
set calendarName to $calendar
set theTitle to $title
tell application "Calendar"
	tell calendar calendarName
		set matches to (every event whose summary is theTitle)
		if (count of matches) is 0 then return ""
		set e to item 1 of matches
		return my encodeRecord({summary of e, my isoDate(start date of e), my isoDate(end date of e), calendarName, description of e, location of e, url of e})
	end tell
end tell
""",
)

CALENDAR_CREATE_EVENT = Operation(
    name="calendar_create_event",
    application="Calendar",
    params=(
        Param("calendar"),
        Param("title"),
        Param("start_date", "date"),
        Param("end_date", "date"),
        Param("description", required=False),
        Param("location", required=False),
    ),
    optional_blocks={
        "description": "set description of newEvent to $description",
        "location": "set location of newEvent to $location",
    },
    body="""
set calendarName to $calendar
tell application "Calendar"
	tell calendar calendarName
		set newEvent to make new event with properties {summary:$title, start date:$start_date, end date:$end_date}
		$opt_description
		$opt_location
		return my encodeRecord({summary of newEvent, my isoDate(start date of newEvent), my isoDate(end date of newEvent), calendarName})
	end tell
end tell
""",
)

CALENDAR_DELETE_EVENT = Operation(
    name="calendar_delete_event",
    application="Calendar",
    params=(Param("calendar"), Param("title")),
    body="""
set calendarName to $calendar
set theTitle to $title
tell application "Calendar"
	tell calendar calendarName
		set matches to (every event whose summary is theTitle)
		if (count of matches) is 0 then return ""
		set e to item 1 of matches
		set theRecord to my encodeRecord({summary of e, my isoDate(start date of e), my isoDate(end date of e), calendarName})
		delete e
	end tell
end tell
return theRecord
""",
)

# ─── Contacts ─────────────────────────────────────────────────────────────────
# Contact layout: id, name, emails (list), phones (list), organization, birthday

CONTACT_HANDLERS = """
on encodePerson(p)
	tell application "Contacts"
		set thePersonId to id of p
		set thePersonName to name of p
		set emailValues to value of every email of p
		set phoneValues to value of every phone of p
		set theOrganization to organization of p
		try
			set theBirthday to birth date of p
		on error
			set theBirthday to missing value
		end try
	end tell
	return my encodeRecord({thePersonId, thePersonName, my encodeList(emailValues), my encodeList(phoneValues), theOrganization, my isoDate(theBirthday)})
end encodePerson
"""

CONTACTS_LIST = Operation(
    name="contacts_list",
    application="Contacts",
    params=(),
    handlers=CONTACT_HANDLERS,
    body="""
tell application "Contacts"
	set thePeople to every person
end tell
set theRecords to {}
repeat with p in thePeople
	set end of theRecords to my encodePerson(contents of p)
end repeat
return my joinList(theRecords, ":::")
""",
)

CONTACTS_SEARCH = Operation(
    name="contacts_search",
    application="Contacts",
    params=(Param("query"),),
    handlers=CONTACT_HANDLERS,
    body="""
set theQuery to $query
tell application "Contacts"
	set thePeople to every person
end tell
set theRecords to {}
repeat with p in thePeople
	tell application "Contacts"
		set theName to name of p
		set theOrganization to organization of p
	end tell
	if theName is missing value then set theName to ""
	if theOrganization is missing value then set theOrganization to ""
	if (theName contains theQuery) or (theOrganization contains theQuery) then
		set end of theRecords to my encodePerson(contents of p)
	end if
end repeat
return my joinList(theRecords, ":::")
""",
)

CONTACTS_GET = Operation(
    name="contacts_get",
    application="Contacts",
    params=(Param("name"),),
    handlers=CONTACT_HANDLERS,
    body="""
set theName to $name
tell application "Contacts"
	set matches to (every person whose name is theName)
	if (count of matches) is 0 then return ""
	set thePerson to item 1 of matches
end tell
return my encodePerson(thePerson)
""",
)

# Contacts derives `name` from first/last name; it cannot be set directly.
CONTACTS_CREATE = Operation(
    name="contacts_create",
    application="Contacts",
    params=(
        Param("first_name"),
        Param("last_name", required=False),
        Param("email", required=False),
        Param("phone", required=False),
        Param("organization", required=False),
        Param("birthday", "date", required=False),
    ),
    optional_blocks={
        "last_name": "set last name of newPerson to $last_name",
        "email": "make new email at end of emails of newPerson with properties {value:$email}",
        "phone": "make new phone at end of phones of newPerson with properties {value:$phone}",
        "organization": "set organization of newPerson to $organization",
        "birthday": "set birth date of newPerson to $birthday",
    },
    handlers=CONTACT_HANDLERS,
    body="""
tell application "Contacts"
	set newPerson to make new person with properties {first name:$first_name}
	$opt_last_name
	$opt_email
	$opt_phone
	$opt_organization
	$opt_birthday
	save
end tell
return my encodePerson(newPerson)
""",
)

CONTACTS_DELETE = Operation(
    name="contacts_delete",
    application="Contacts",
    params=(Param("name"),),
    handlers=CONTACT_HANDLERS,
    body="""
set theName to $name
tell application "Contacts"
	set matches to (every person whose name is theName)
	if (count of matches) is 0 then return ""
	set thePerson to item 1 of matches
end tell
set theRecord to my encodePerson(thePerson)
tell application "Contacts"
	delete thePerson
	save
end tell
return theRecord
""",
)


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        NOTES_LIST,
        NOTES_SEARCH,
        NOTES_GET,
        NOTES_CREATE,
        NOTES_EDIT,
        NOTES_DELETE,
        CALENDAR_LIST_CALENDARS,
        CALENDAR_LIST_EVENTS,
        CALENDAR_SEARCH_EVENTS,
        CALENDAR_GET_EVENT,
        CALENDAR_CREATE_EVENT,
        CALENDAR_DELETE_EVENT,
        CONTACTS_LIST,
        CONTACTS_SEARCH,
        CONTACTS_GET,
        CONTACTS_CREATE,
        CONTACTS_DELETE,
    )
}

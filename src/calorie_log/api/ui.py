"""Minimal browser client that consumes the entries API."""


def render_index(api_prefix: str) -> str:
    """Return the client page wired to the given API prefix."""
    return _INDEX_HTML.replace("__API_PREFIX__", api_prefix)


_INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Calorie Log</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; max-width: 48rem; }
      h1 { margin-bottom: 0.25rem; }
      .muted { color: #71717a; font-size: 0.85rem; }
      .row { margin-bottom: 1rem; }
      .total { font-size: 2rem; font-weight: 600; }
      input, select { padding: 0.4rem 0.6rem; }
      button { padding: 0.4rem 0.8rem; }
      ul { list-style: none; padding: 0; }
      li { display: flex; justify-content: space-between; align-items: center;
           border: 1px solid #e4e4e7; border-radius: 0.5rem; padding: 0.5rem 0.75rem;
           margin-bottom: 0.5rem; }
      .error { color: #dc2626; }
    </style>
  </head>
  <body>
    <h1>Calorie Log</h1>
    <p class="muted">Log what you eat and track your daily calories.</p>
    <div class="row">
      <label for="day">Day</label><br />
      <input id="day" type="date" />
      <span id="day-label" class="muted"></span>
    </div>
    <div class="row">
      <span class="muted">Total for the day</span><br />
      <span id="total" class="total">0</span> <span class="muted">kcal</span>
    </div>
    <h2>Entries</h2>
    <p id="empty" class="muted">No entries for this day yet. Add your first meal below.</p>
    <ul id="entries"></ul>
    <h2>Add entry</h2>
    <form id="entry-form">
      <div class="row">
        <label for="name">Food / meal</label><br />
        <input id="name" placeholder="e.g. Banana, Chicken salad" />
      </div>
      <div class="row">
        <label for="calories">Calories (blank to estimate)</label><br />
        <input id="calories" type="number" min="0" placeholder="e.g. 250" />
        <button type="button" id="estimate">Estimate</button>
      </div>
      <div class="row">
        <label for="category">Category (optional)</label><br />
        <select id="category">
          <option value="">Select</option>
          <option value="Breakfast">Breakfast</option>
          <option value="Lunch">Lunch</option>
          <option value="Dinner">Dinner</option>
          <option value="Snack">Snack</option>
        </select>
      </div>
      <p id="error" class="error"></p>
      <button type="submit" id="submit">Add entry</button>
    </form>
    <script>
      const API = '__API_PREFIX__';
      const dayInput = document.getElementById('day');
      const errorBox = document.getElementById('error');

      function setError(message) {
        errorBox.textContent = message || '';
      }

      function renderEntries(data) {
        const list = document.getElementById('entries');
        list.innerHTML = '';
        document.getElementById('total').textContent = data.totalCalories;
        document.getElementById('empty').hidden = data.entries.length > 0;
        for (const entry of data.entries) {
          const item = document.createElement('li');
          const label = document.createElement('span');
          label.textContent = entry.name + ' \\u00b7 ' + (entry.category || 'Uncategorized')
            + ' \\u00b7 ' + entry.calories + ' kcal';
          const remove = document.createElement('button');
          remove.textContent = 'Delete';
          remove.onclick = () => deleteEntry(entry.id);
          item.appendChild(label);
          item.appendChild(remove);
          list.appendChild(item);
        }
      }

      async function fetchEntries() {
        setError('');
        const day = dayInput.value;
        document.getElementById('day-label').textContent =
          new Date(day).toLocaleDateString(undefined, {
            weekday: 'short', year: 'numeric', month: 'short', day: 'numeric'
          });
        const res = await fetch(API + '/entries?date=' + encodeURIComponent(day));
        if (!res.ok) {
          setError('Could not load entries. Please try again.');
          return;
        }
        renderEntries(await res.json());
      }

      async function deleteEntry(id) {
        setError('');
        const res = await fetch(API + '/entries?id=' + encodeURIComponent(id), {
          method: 'DELETE'
        });
        if (!res.ok) {
          setError('Could not delete entry. Please try again.');
          return;
        }
        await fetchEntries();
      }

      document.getElementById('estimate').onclick = async () => {
        const name = document.getElementById('name').value.trim();
        if (!name) return;
        const params = new URLSearchParams({ name });
        const category = document.getElementById('category').value;
        if (category) params.set('category', category);
        const res = await fetch(API + '/entries/estimate?' + params.toString());
        if (res.ok) {
          document.getElementById('calories').value = (await res.json()).calories;
        }
      };

      document.getElementById('entry-form').onsubmit = async (event) => {
        event.preventDefault();
        const name = document.getElementById('name').value.trim();
        if (!name) return;
        const rawCalories = document.getElementById('calories').value.trim();
        const calories = rawCalories ? Number(rawCalories) : null;
        if (calories !== null && (Number.isNaN(calories) || calories <= 0)) {
          setError('Calories must be a positive number.');
          return;
        }
        const res = await fetch(API + '/entries', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({
            name,
            calories,
            category: document.getElementById('category').value || null,
            date: dayInput.value
          })
        });
        if (!res.ok) {
          setError('Could not add entry. Please try again.');
          return;
        }
        event.target.reset();
        await fetchEntries();
      };

      dayInput.value = new Date().toISOString().slice(0, 10);
      dayInput.onchange = fetchEntries;
      fetchEntries();
    </script>
  </body>
</html>
"""

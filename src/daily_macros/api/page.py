"""HTML form page for the tracker."""

TRACKER_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Daily Macros</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .layout { display: grid; grid-template-columns: 1fr auto 1fr; gap: 2rem; }
      .card { background: #fff; border-radius: 8px; padding: 1rem;
              box-shadow: 0 1px 3px rgba(0, 0, 0, 0.15); margin-bottom: 1rem; }
      .ingredient { background: #f6f6f6; padding: 0.75rem; margin-bottom: 0.75rem; }
      .bar { width: 16rem; background: #e5e7eb; border-radius: 999px; height: 1rem; }
      .fill { background: #2563eb; border-radius: 999px; height: 1rem; }
      input, select { padding: 0.3rem 0.5rem; margin: 0.2rem 0; }
      label { display: block; font-size: 0.85rem; }
    </style>
  </head>
  <body>
    <div class="layout">
      <div>
        <h2>Daily Meals</h2>
        <div id="meals"></div>
      </div>
      <div class="card">
        <h2>Daily Progress</h2>
        <div id="progress"></div>
      </div>
      <div class="card">
        <h2>Daily Goals</h2>
        <div id="goals"></div>
      </div>
    </div>
    <script>
      const NUTRIENTS = ['calories', 'protein', 'fat', 'carbs', 'fiber'];

      async function api(method, path, body) {
        const res = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        return res.json();
      }

      function field(label, value, onChange) {
        const wrapper = document.createElement('div');
        const caption = document.createElement('label');
        caption.textContent = label;
        const input = document.createElement('input');
        input.type = 'number';
        input.value = value;
        input.onchange = () => onChange(input.value);
        wrapper.append(caption, input);
        return wrapper;
      }

      async function updateIngredient(mealId, ingredientId, updates) {
        await api('PATCH', `/meals/${mealId}/ingredients/${ingredientId}`, updates);
        await refresh();
      }

      function renderIngredient(meal, ing) {
        const box = document.createElement('div');
        box.className = 'ingredient';
        const name = document.createElement('input');
        name.placeholder = 'Ingredient name';
        name.value = ing.name;
        name.onchange = () => updateIngredient(meal.id, ing.id, { name: name.value });
        const amount = field('Amount', ing.amount,
          value => updateIngredient(meal.id, ing.id, { amount: value }));
        const unit = document.createElement('select');
        for (const tag of ['g', 'ml']) {
          const option = document.createElement('option');
          option.value = tag;
          option.textContent = tag;
          option.selected = ing.unit === tag;
          unit.append(option);
        }
        unit.onchange = () => updateIngredient(meal.id, ing.id, { unit: unit.value });
        const remove = document.createElement('button');
        remove.textContent = 'Remove';
        remove.onclick = async () => {
          await api('DELETE', `/meals/${meal.id}/ingredients/${ing.id}`);
          await refresh();
        };
        box.append(name, amount, unit, remove);
        for (const key of NUTRIENTS) {
          const label = `${key[0].toUpperCase()}${key.slice(1)} (per 100${ing.unit})`;
          box.append(field(label, ing[key],
            value => updateIngredient(meal.id, ing.id, { [key]: value })));
        }
        return box;
      }

      function renderMeals(meals) {
        const root = document.getElementById('meals');
        root.replaceChildren();
        for (const meal of meals) {
          const card = document.createElement('div');
          card.className = 'card';
          const title = document.createElement('h3');
          title.textContent = meal.name;
          card.append(title);
          for (const ing of meal.ingredients) {
            card.append(renderIngredient(meal, ing));
          }
          const add = document.createElement('button');
          add.textContent = '+ Add Ingredient';
          add.onclick = async () => {
            await api('POST', `/meals/${meal.id}/ingredients`);
            await refresh();
          };
          card.append(add);
          root.append(card);
        }
      }

      function renderProgress(entries) {
        const root = document.getElementById('progress');
        root.replaceChildren();
        for (const entry of entries) {
          const block = document.createElement('div');
          const title = document.createElement('h4');
          title.textContent = entry.label;
          const bar = document.createElement('div');
          bar.className = 'bar';
          const fill = document.createElement('div');
          fill.className = 'fill';
          fill.style.width = `${entry.percent}%`;
          bar.append(fill);
          const text = document.createElement('div');
          text.textContent = entry.display;
          block.append(title, bar, text);
          root.append(block);
        }
      }

      function renderGoals(goals) {
        const root = document.getElementById('goals');
        root.replaceChildren();
        for (const sex of ['male', 'female']) {
          const button = document.createElement('button');
          button.textContent = sex === 'male' ? 'Male' : 'Female';
          button.disabled = goals.sex === sex;
          button.onclick = async () => {
            await api('PATCH', '/goals', { sex });
            await refresh();
          };
          root.append(button);
        }
        for (const key of ['calories', 'protein', 'carbs', 'fat', 'fiber']) {
          root.append(field(`${key} goal`, goals[key], async value => {
            await api('PATCH', '/goals', { [key]: value });
            await refresh();
          }));
        }
      }

      async function refresh() {
        const [meals, progress, goals] = await Promise.all([
          api('GET', '/meals'),
          api('GET', '/progress'),
          api('GET', '/goals'),
        ]);
        renderMeals(meals.meals);
        renderProgress(progress.progress);
        renderGoals(goals.goals);
      }

      refresh();
    </script>
  </body>
</html>
"""

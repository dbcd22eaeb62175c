"""Hand-curated general terms (frontend, backend and devops)."""

CURATED_TERMS = [
    {
        'term': 'fetch',
        'translation': 'traer datos del servidor',
        'category': 'frontend',
        'description_es': 'API nativa del navegador para hacer solicitudes HTTP asincrónicas basadas en promesas.',
        'description_en': 'Native browser API for asynchronous HTTP requests that returns promises.',
        'aliases': ['fetch API', 'window.fetch', 'native fetch'],
        'tags': ['http', 'api', 'promises', 'abortcontroller'],
        'example': {
            'title_es': 'GET con verificación de estado',
            'title_en': 'GET with status check',
            'code': (
                'async function loadPosts() {\n'
                '  const res = await fetch("/api/posts", { cache: "no-store" });\n'
                '\n'
                '  if (!res.ok) throw new Error(`HTTP ${res.status} ${res.statusText}`);\n'
                '\n'
                '  return res.json();\n'
                '}'
            ),
            'note_es': 'Siempre valida res.ok y devuelve JSON parseado.',
            'note_en': 'Always check res.ok and parse JSON before using it.',
        },
        'second_example': {
            'title_es': 'Timeout y cancelación con AbortController',
            'title_en': 'Timeout and cancel with AbortController',
            'code': (
                'async function fetchWithTimeout(url, timeoutMs = 8000) {\n'
                '  const controller = new AbortController();\n'
                '  const timer = setTimeout(() => controller.abort(), timeoutMs);\n'
                '\n'
                '  try {\n'
                '    const res = await fetch(url, { signal: controller.signal });\n'
                '    if (!res.ok) throw new Error(`HTTP ${res.status}`);\n'
                '\n'
                '    const text = await res.text();\n'
                '    return text ? JSON.parse(text) : null;\n'
                '  } finally {\n'
                '    clearTimeout(timer);\n'
                '  }\n'
                '}'
            ),
            'note_es': 'Evita fetch colgados, maneja respuestas vacías y permite cancelar.',
            'note_en': 'Prevents hanging requests, handles empty bodies, and supports cancelation.',
        },
        'exercise_example': {
            'title_es': 'POST JSON con reintento básico',
            'title_en': 'JSON POST with basic retry',
            'code': (
                'async function postJson(url, payload, retries = 1) {\n'
                '  let lastError;\n'
                '\n'
                '  for (let attempt = 0; attempt <= retries; attempt++) {\n'
                '    try {\n'
                '      const res = await fetch(url, {\n'
                '        method: "POST",\n'
                '        headers: { "Content-Type": "application/json" },\n'
                '        body: JSON.stringify(payload),\n'
                '      });\n'
                '\n'
                '      if (!res.ok) {\n'
                '        const message = await res.text();\n'
                '        throw new Error(`HTTP ${res.status}: ${message || res.statusText}`);\n'
                '      }\n'
                '\n'
                '      const text = await res.text();\n'
                '      return text ? JSON.parse(text) : null;\n'
                '    } catch (error) {\n'
                '      lastError = error;\n'
                '      if (attempt === retries) throw error;\n'
                '      await new Promise((resolve) => setTimeout(resolve, 500 * (attempt + 1)));\n'
                '    }\n'
                '  }\n'
                '\n'
                '  throw lastError;\n'
                '}'
            ),
            'note_es': 'Diferencia errores HTTP de fallos de red y agrega reintentos con backoff corto.',
            'note_en': 'Separates HTTP errors from network failures and adds short backoff retries.',
        },
        'what_es': 'Consumir APIs REST o GraphQL y enviar/recibir JSON sin dependencias externas.',
        'what_en': 'Consume REST/GraphQL APIs and send/receive JSON without extra dependencies.',
        'how_es': 'Usa fetch(url, { method, headers, body, signal }) con AbortController para timeouts, valida res.ok y maneja cuerpos vacíos o no-JSON.',
        'how_en': 'Use fetch(url, { method, headers, body, signal }) with AbortController for timeouts, check res.ok, and handle empty or non-JSON bodies.',
    },
    {
        'term': 'useEffect',
        'translation': 'efectos en React',
        'category': 'frontend',
        'description_es': 'Hook de React para ejecutar efectos secundarios (fetch, suscripciones, timers) sincronizados con el ciclo de vida del componente.',
        'description_en': 'React hook to run side effects (fetching, subscriptions, timers) tied to the component lifecycle.',
        'aliases': ['react effect', 'effect hook'],
        'tags': ['react', 'hooks', 'lifecycle'],
        'example': {
            'title_es': 'Suscripción y limpieza',
            'title_en': 'Subscribe and cleanup',
            'code': (
                'import { useEffect } from "react";\n'
                '\n'
                'function OnlineStatus() {\n'
                '  useEffect(() => {\n'
                '    function handleOnline() {\n'
                '      console.log("Estoy online");\n'
                '    }\n'
                '\n'
                '    window.addEventListener("online", handleOnline);\n'
                '    return () => window.removeEventListener("online", handleOnline);\n'
                '  }, []);\n'
                '\n'
                '  return <p>Escuchando estado de red...</p>;\n'
                '}'
            ),
            'note_es': 'Devuelve una función de limpieza para evitar fugas y listeners duplicados.',
            'note_en': 'Return a cleanup function to avoid leaks and duplicate listeners.',
        },
        'second_example': {
            'title_es': 'Fetch al montar componente',
            'title_en': 'Fetch on mount',
            'code': (
                'useEffect(() => {\n'
                '  let ignore = false;\n'
                '\n'
                '  async function startFetching() {\n'
                '    const json = await fetchTodos(userId);\n'
                '    if (!ignore) {\n'
                '      setTodos(json);\n'
                '    }\n'
                '  }\n'
                '\n'
                '  startFetching();\n'
                '\n'
                '  return () => {\n'
                '    ignore = true;\n'
                '  };\n'
                '}, [userId]);'
            ),
            'note_es': 'Patrón para evitar condiciones de carrera en fetch.',
            'note_en': 'Pattern to avoid race conditions in data fetching.',
        },
        'exercise_example': {
            'title_es': 'Temporizador con limpieza',
            'title_en': 'Timer with cleanup',
            'code': (
                'function Timer() {\n'
                '  const [count, setCount] = useState(0);\n'
                '\n'
                '  useEffect(() => {\n'
                '    const id = setInterval(() => {\n'
                '      setCount(c => c + 1);\n'
                '    }, 1000);\n'
                '\n'
                '    return () => clearInterval(id);\n'
                '  }, []);\n'
                '\n'
                '  return <h1>{count}</h1>;\n'
                '}'
            ),
            'note_es': 'Es crucial limpiar el intervalo al desmontar.',
            'note_en': 'Cleaning up the interval on unmount is crucial.',
        },
        'what_es': 'Sincroniza lógica externa (fetch, eventos, timers) con el render y las dependencias declaradas.',
        'what_en': 'Sync external logic (fetch, events, timers) with render and declared dependencies.',
        'how_es': 'Declara dependencias en el array final; limpia recursos retornando una función.',
        'how_en': 'List dependencies in the array; return a cleanup to release resources.',
        'language_override': 'ts',
    },
    {
        'term': 'bg-gradient-to-r',
        'translation': 'degradado horizontal Tailwind',
        'category': 'frontend',
        'description_es': 'Clase utilitaria de Tailwind CSS que aplica un fondo degradado de izquierda a derecha.',
        'description_en': 'Tailwind utility that applies a left-to-right gradient background.',
        'aliases': ['gradient tailwind', 'bg gradient'],
        'tags': ['tailwind', 'css', 'ui'],
        'example': {
            'title_es': 'Botón con degradado',
            'title_en': 'Gradient button',
            'code': '<button class="bg-gradient-to-r from-emerald-500 via-teal-500 to-sky-500 text-white px-4 py-2 rounded-lg shadow">CTA</button>',
            'note_es': 'Combínalo con from-*, via-* y to-* para definir colores.',
            'note_en': 'Combine with from-*, via-*, and to-* to set colors.',
        },
        'second_example': {
            'title_es': 'Texto con degradado',
            'title_en': 'Gradient text',
            'code': (
                '<h1 class="bg-gradient-to-r from-blue-600 to-violet-600 bg-clip-text text-transparent text-5xl font-bold">\n'
                '  Hello World\n'
                '</h1>'
            ),
            'note_es': 'Usa bg-clip-text y text-transparent para aplicar el degradado al texto.',
            'note_en': 'Use bg-clip-text and text-transparent to apply gradient to text.',
        },
        'exercise_example': {
            'title_es': 'Tarjeta con borde degradado',
            'title_en': 'Gradient border card',
            'code': (
                '<div class="p-1 bg-gradient-to-r from-pink-500 via-red-500 to-yellow-500 rounded-xl">\n'
                '  <div class="bg-white p-6 rounded-lg">\n'
                '    <h2 class="font-bold text-xl">Card Title</h2>\n'
                '    <p>Content goes here...</p>\n'
                '  </div>\n'
                '</div>'
            ),
            'note_es': 'Un contenedor con padding crea el efecto de borde.',
            'note_en': 'A container with padding creates the border effect.',
        },
        'what_es': 'Aporta contraste y jerarquía visual a botones o secciones sin escribir CSS adicional.',
        'what_en': 'Adds contrast and visual hierarchy to buttons or sections without extra CSS.',
        'how_es': 'Aplica la clase bg-gradient-to-r en el atributo class junto con from-*, to-* y opcionalmente via-*. Para texto usa bg-clip-text y text-transparent.',
        'how_en': 'Apply the bg-gradient-to-r class in the class attribute along with from-*, to-* and optionally via-*. For text use bg-clip-text and text-transparent.',
        'language_override': 'html',
    },
    {
        'term': 'flex-col',
        'translation': 'columna en flex (Tailwind)',
        'category': 'frontend',
        'description_es': 'Clase de Tailwind CSS que establece la dirección de los hijos en columna dentro de un contenedor flex.',
        'description_en': 'Tailwind utility to set flex direction to column inside a flex container.',
        'aliases': ['flex column', 'tailwind flex-col'],
        'tags': ['tailwind', 'flexbox', 'layout'],
        'example': {
            'title_es': 'Stack vertical en tarjeta',
            'title_en': 'Vertical stack in card',
            'code': (
                '<div class="flex flex-col gap-3 p-4 border rounded-lg">\n'
                '  <h3 class="text-lg font-semibold">Título</h3>\n'
                '  <p class="text-sm text-slate-500">Descripción breve del item.</p>\n'
                '  <button class="self-end bg-emerald-500 text-white px-3 py-2 rounded">Acción</button>\n'
                '</div>'
            ),
            'note_es': 'Usa gap-* para espaciar y self-* para alinear elementos puntuales.',
            'note_en': 'Pair with gap-* for spacing and self-* to align specific items.',
        },
        'second_example': {
            'title_es': 'Formulario vertical',
            'title_en': 'Vertical form',
            'code': (
                '<form class="flex flex-col gap-4">\n'
                '  <label class="flex flex-col">\n'
                '    Email\n'
                '    <input type="email" class="border p-2 rounded" />\n'
                '  </label>\n'
                '  <button type="submit" class="bg-blue-500 text-white p-2 rounded">Sign In</button>\n'
                '</form>'
            ),
            'note_es': 'Ideal para formularios móviles.',
            'note_en': 'Ideal for mobile-first forms.',
        },
        'exercise_example': {
            'title_es': 'Layout de barra lateral',
            'title_en': 'Sidebar layout',
            'code': (
                '<div class="flex h-screen">\n'
                '  <aside class="w-64 bg-gray-800 text-white flex flex-col p-4">\n'
                '    <nav class="flex-1 flex flex-col gap-2">\n'
                '      <a href="#" class="p-2 hover:bg-gray-700 rounded">Home</a>\n'
                '      <a href="#" class="p-2 hover:bg-gray-700 rounded">Settings</a>\n'
                '    </nav>\n'
                '    <div class="mt-auto">User Profile</div>\n'
                '  </aside>\n'
                '  <main class="flex-1 p-8">Content</main>\n'
                '</div>'
            ),
            'note_es': 'Flex-col organiza la navegación verticalmente.',
            'note_en': 'Flex-col organizes navigation vertically.',
        },
        'what_es': 'Simplifica layouts en columna sin escribir CSS personalizado.',
        'what_en': 'Simplifies column layouts without custom CSS.',
        'how_es': 'Aplica flex y flex-col en el contenedor; ajusta gap y alineación con justify/align utilities.',
        'how_en': 'Apply flex and flex-col on the container; adjust gap and alignment with justify/align utilities.',
    },
    {
        'term': 'aria-label',
        'translation': 'etiqueta accesible',
        'category': 'frontend',
        'description_es': 'Atributo HTML que proporciona texto accesible para lectores de pantalla cuando no hay texto visible.',
        'description_en': 'HTML attribute providing accessible text for screen readers when no visible text exists.',
        'aliases': ['aria label', 'accessibility label'],
        'tags': ['html', 'a11y', 'accessibility'],
        'example': {
            'title_es': 'Botón icono accesible',
            'title_en': 'Accessible icon button',
            'code': (
                '<button aria-label="Abrir menú" class="p-2 rounded hover:bg-slate-100">\n'
                '  <svg aria-hidden="true" viewBox="0 0 24 24" class="h-5 w-5">\n'
                '    <path d="M4 6h16M4 12h16M4 18h16" stroke="currentColor" stroke-width="2"/>\n'
                '  </svg>\n'
                '</button>'
            ),
            'note_es': 'aria-label describe la acción cuando el botón solo muestra un ícono.',
            'note_en': 'aria-label describes the action when the button only shows an icon.',
        },
        'second_example': {
            'title_es': 'Navegación accesible',
            'title_en': 'Accessible navigation',
            'code': (
                '<nav aria-label="Principal">\n'
                '  <ul>\n'
                '    <li><a href="/">Inicio</a></li>\n'
                '    <li><a href="/shop">Tienda</a></li>\n'
                '  </ul>\n'
                '</nav>'
            ),
            'note_es': 'Distingue múltiples regiones de navegación.',
            'note_en': 'Distinguishes multiple navigation regions.',
        },
        'exercise_example': {
            'title_es': 'Input de búsqueda solo icono',
            'title_en': 'Icon-only search input',
            'code': (
                '<form role="search">\n'
                '  <label for="search" class="sr-only">Buscar productos</label>\n'
                '  <input id="search" type="text" placeholder="Buscar..." />\n'
                '  <button type="submit" aria-label="Realizar búsqueda">🔍</button>\n'
                '</form>'
            ),
            'note_es': 'Usa sr-only o aria-label para inputs sin etiqueta visible.',
            'note_en': 'Use sr-only or aria-label for inputs without visible labels.',
        },
        'what_es': 'Hace que controles sin texto visible sean anunciados correctamente por tecnologías asistivas.',
        'what_en': 'Ensures controls without visible text are announced by assistive tech.',
        'how_es': 'Añade aria-label conciso y accionable; evita duplicar cuando ya hay texto visible.',
        'how_en': 'Add a concise, action-oriented aria-label; avoid duplicating visible text.',
    },
    {
        'term': 'useState',
        'translation': 'estado local en React',
        'category': 'frontend',
        'description_es': 'Hook que crea y actualiza valores reactivos dentro de componentes.',
        'description_en': 'React Hook that creates a reactive value inside function components.',
        'aliases': ['hook state'],
        'tags': ['react', 'hooks', 'state'],
        'example': {
            'title_es': 'Contador minimal',
            'title_en': 'Minimal counter',
            'code': (
                'export function Counter() {\n'
                '  const [count, setCount] = useState(0);\n'
                '\n'
                '  return (\n'
                '    <button onClick={() => setCount((value) => value + 1)}>\n'
                '      {count}\n'
                '    </button>\n'
                '  );\n'
                '}'
            ),
            'note_es': 'Cada actualización re-renderiza únicamente este componente.',
            'note_en': 'Each update re-renders only this component.',
        },
        'second_example': {
            'title_es': 'Estado de formulario',
            'title_en': 'Form state',
            'code': (
                'function Form() {\n'
                "  const [text, setText] = useState('hello');\n"
                '\n'
                '  return (\n'
                '    <>\n'
                '      <input value={text} onChange={(e) => setText(e.target.value)} />\n'
                '      <p>You typed: {text}</p>\n'
                '    </>\n'
                '  );\n'
                '}'
            ),
            'note_es': 'Controla inputs de formulario (controlled components).',
            'note_en': 'Controls form inputs (controlled components).',
        },
        'exercise_example': {
            'title_es': 'Toggle booleano',
            'title_en': 'Boolean toggle',
            'code': (
                'function Toggle() {\n'
                '  const [isOn, setIsOn] = useState(false);\n'
                '\n'
                '  return (\n'
                '    <button onClick={() => setIsOn(!isOn)}>\n'
                "      {isOn ? 'ON' : 'OFF'}\n"
                '    </button>\n'
                '  );\n'
                '}'
            ),
            'note_es': 'Patrón simple para interruptores o modales.',
            'note_en': 'Simple pattern for switches or modals.',
        },
        'what_es': 'Resuelve la necesidad de guardar input del usuario, flags de UI o datos cacheados.',
        'what_en': 'Solves local UI data like user input, flags or cached responses.',
        'how_es': 'Importa useState desde react, inicializa con un valor y usa el setter para actualizar de forma inmutable.',
        'how_en': 'Import useState from react, provide an initial value and call the setter to update immutably.',
        'language_override': 'ts',
    },
    {
        'term': 'debounce',
        'translation': 'espera antes de ejecutar',
        'category': 'frontend',
        'description_es': 'Patrón que retrasa la ejecución hasta que pasa un intervalo sin nuevos eventos.',
        'description_en': 'Pattern that delays execution until no new events fire within a window.',
        'aliases': ['debouncer'],
        'tags': ['performance', 'ux'],
        'example': {
            'title_es': 'Input con debounce',
            'title_en': 'Debounced input',
            'code': (
                'const debouncedChange = useMemo(() =>\n'
                '  debounce((value) => {\n'
                '    search(value);\n'
                '  }, 250),\n'
                '[]);'
            ),
            'note_es': 'Evita bombardear al servidor en cada pulsación.',
            'note_en': 'Avoids hammering the server on every keystroke.',
        },
        'second_example': {
            'title_es': 'Resize handler',
            'title_en': 'Resize handler',
            'code': (
                "window.addEventListener('resize', debounce(() => {\n"
                "  console.log('Window resized');\n"
                '}, 200));'
            ),
            'note_es': 'Optimiza eventos frecuentes como resize o scroll.',
            'note_en': 'Optimizes frequent events like resize or scroll.',
        },
        'exercise_example': {
            'title_es': 'Botón de guardado automático',
            'title_en': 'Autosave button',
            'code': (
                'const save = debounce((data) => {\n'
                '  api.save(data);\n'
                '}, 1000);\n'
                '\n'
                'function Editor({ data }) {\n'
                '  return <textarea onChange={(e) => save(e.target.value)} defaultValue={data} />;\n'
                '}'
            ),
            'note_es': 'Guarda cambios después de que el usuario deja de escribir.',
            'note_en': 'Saves changes after user stops typing.',
        },
        'what_es': 'Sirve para buscadores, auto guardados o listeners scroll.',
        'what_en': 'Useful for search bars, autosave workflows or scroll listeners.',
        'how_es': 'Envuelve la función costosa con debounce(fn, tiempo) y limpia el timer al desmontar.',
        'how_en': 'Wrap the expensive logic with debounce(fn, wait) and clear the timer on unmount.',
    },
    {
        'term': 'JWT',
        'translation': 'token firmado',
        'category': 'backend',
        'description_es': 'JSON Web Token firmado que transporta claims entre cliente y servidor.',
        'description_en': 'Signed JSON Web Token that carries claims between client and server.',
        'aliases': ['json web token'],
        'tags': ['auth', 'security'],
        'example': {
            'title_es': 'Generar token en Node',
            'title_en': 'Issue token in Node',
            'code': (
                'const token = jwt.sign(\n'
                '  { sub: user.id, role: user.role },\n'
                '  process.env.JWT_SECRET!,\n'
                '  { expiresIn: "1h" }\n'
                ');'
            ),
            'note_es': 'Incluye sólo la info necesaria y revoca cuando sea posible.',
            'note_en': 'Only include required claims and rotate secrets.',
        },
        'second_example': {
            'title_es': 'Verificar token (Middleware)',
            'title_en': 'Verify token (Middleware)',
            'code': (
                'function authenticateToken(req, res, next) {\n'
                "  const authHeader = req.headers['authorization'];\n"
                "  const token = authHeader && authHeader.split(' ')[1];\n"
                '  if (token == null) return res.sendStatus(401);\n'
                '\n'
                '  jwt.verify(token, process.env.JWT_SECRET, (err, user) => {\n'
                '    if (err) return res.sendStatus(403);\n'
                '    req.user = user;\n'
                '    next();\n'
                '  });\n'
                '}'
            ),
            'note_es': 'Middleware estándar para proteger rutas en Express.',
            'note_en': 'Standard middleware to protect routes in Express.',
        },
        'exercise_example': {
            'title_es': 'Decodificar token en cliente',
            'title_en': 'Decode token on client',
            'code': (
                'function parseJwt(token) {\n'
                "  const base64 = token.split('.')[1].replace(/-/g, '+').replace(/_/g, '/');\n"
                '  return JSON.parse(window.atob(base64));\n'
                '}'
            ),
            'note_es': 'Útil para leer claims (rol, exp) sin validar firma.',
            'note_en': 'Useful to read claims (role, exp) without signature validation.',
        },
        'what_es': 'Resuelve autenticación stateless y delega la verificación al backend.',
        'what_en': 'Enables stateless authentication where the backend validates signatures.',
        'how_es': 'Firma con una clave segura, ajusta expiración corta y valida con middleware en cada request.',
        'how_en': 'Sign tokens with a strong secret, set short TTLs and validate them in middleware per request.',
    },
    {
        'term': 'Docker',
        'translation': 'contenedores reproducibles',
        'category': 'devops',
        'description_es': 'Plataforma para empacar aplicaciones y dependencias en contenedores aislados.',
        'description_en': 'Platform to package apps and dependencies into isolated containers.',
        'aliases': ['docker compose'],
        'tags': ['containers', 'devops'],
        'example': {
            'title_es': 'API empaquetada',
            'title_en': 'Packaged API',
            'code': (
                'FROM node:20-alpine\n'
                'WORKDIR /app\n'
                'COPY package*.json ./\n'
                'RUN npm ci --only=production\n'
                'COPY . .\n'
                'CMD ["node", "dist/server.js"]'
            ),
            'note_es': 'La imagen se ejecuta igual en tu laptop o en producción.',
            'note_en': 'Image behaves the same locally and in prod.',
        },
        'second_example': {
            'title_es': 'Docker Compose básico',
            'title_en': 'Basic Docker Compose',
            'code': (
                "version: '3.8'\n"
                'services:\n'
                '  web:\n'
                '    build: .\n'
                '    ports:\n'
                '      - "3000:3000"\n'
                '  db:\n'
                '    image: postgres:13\n'
                '    environment:\n'
                '      POSTGRES_PASSWORD: example'
            ),
            'note_es': 'Orquesta múltiples contenedores (app + db).',
            'note_en': 'Orchestrates multiple containers (app + db).',
        },
        'exercise_example': {
            'title_es': 'Contenedor de Python',
            'title_en': 'Python container',
            'code': (
                'FROM python:3.12-slim\n'
                'WORKDIR /app\n'
                'COPY requirements.txt .\n'
                'RUN pip install --no-cache-dir -r requirements.txt\n'
                'COPY . .\n'
                'CMD ["python", "./app.py"]'
            ),
            'note_es': 'Estructura similar para cualquier lenguaje.',
            'note_en': 'Similar structure for any language.',
        },
        'what_es': 'Facilita ambientes consistentes y despliegues predecibles.',
        'what_en': 'Gives consistent environments and predictable deployments.',
        'how_es': 'Escribe un Dockerfile, construye la imagen y orquesta servicios con compose o Kubernetes.',
        'how_en': 'Craft a Dockerfile, build the image and orchestrate services via Compose or Kubernetes.',
    },
    {
        'term': 'GraphQL',
        'translation': 'consultas declarativas',
        'category': 'backend',
        'description_es': 'Especificación para exponer APIs donde el cliente define la forma exacta de los datos.',
        'description_en': 'Specification that lets clients ask precisely for the data shape they need.',
        'aliases': ['gql'],
        'tags': ['api', 'schema'],
        'example': {
            'title_es': 'Resolver básico',
            'title_en': 'Basic resolver',
            'code': (
                'const resolvers = {\n'
                '  Query: {\n'
                '    term: (_parent, args, ctx) =>\n'
                '      ctx.prisma.term.findUnique({ where: { slug: args.slug } }),\n'
                '  },\n'
                '};'
            ),
            'note_es': 'Cada resolver retorna justo lo que la consulta solicita.',
            'note_en': 'Each resolver matches what the query asked for.',
        },
        'second_example': {
            'title_es': 'Consulta desde cliente',
            'title_en': 'Client query',
            'code': (
                'query GetUser($id: ID!) {\n'
                '  user(id: $id) {\n'
                '    name\n'
                '    posts { title }\n'
                '  }\n'
                '}'
            ),
            'note_es': 'Pide datos anidados en una sola petición.',
            'note_en': 'Requests nested data in a single request.',
        },
        'exercise_example': {
            'title_es': 'Mutación para crear usuario',
            'title_en': 'Create user mutation',
            'code': (
                'mutation CreateUser($name: String!, $email: String!) {\n'
                '  createUser(name: $name, email: $email) {\n'
                '    id\n'
                '    name\n'
                '    email\n'
                '  }\n'
                '}'
            ),
            'note_es': 'Las mutaciones modifican datos en el servidor.',
            'note_en': 'Mutations modify data on the server.',
        },
        'what_es': 'Resuelve overfetching/subfetching al dejar que el frontend describa los campos.',
        'what_en': 'Solves overfetching/underfetching by letting frontend describe fields.',
        'how_es': 'Define un schema, implementa resolvers y usa herramientas como Apollo o Yoga para exponer el endpoint.',
        'how_en': 'Write the schema, map resolvers and expose it using Apollo, Mercurius or Yoga.',
    },
    {
        'term': 'CI/CD',
        'translation': 'entrega continua',
        'category': 'devops',
        'description_es': 'Práctica que automatiza tests, builds y despliegues en cada cambio.',
        'description_en': 'Practice that automates tests, builds and deployments on every change.',
        'aliases': ['pipelines'],
        'tags': ['automation', 'quality'],
        'example': {
            'title_es': 'GitHub Actions',
            'title_en': 'GitHub Actions',
            'code': (
                'name: ci\n'
                'on:\n'
                '  push:\n'
                '    branches: [main]\n'
                '\n'
                'jobs:\n'
                '  test:\n'
                '    runs-on: ubuntu-latest\n'
                '    steps:\n'
                '      - uses: actions/checkout@v4\n'
                '      - uses: actions/setup-node@v4\n'
                '        with:\n'
                '          node-version: 20\n'
                '      - run: npm ci\n'
                '      - run: npm test'
            ),
            'note_es': 'Cada commit ejecuta tests antes de mergear.',
            'note_en': 'Every commit runs tests before merging.',
        },
        'second_example': {
            'title_es': 'Pipeline de despliegue',
            'title_en': 'Deployment pipeline',
            'code': (
                'deploy:\n'
                '  needs: test\n'
                '  runs-on: ubuntu-latest\n'
                "  if: github.ref == 'refs/heads/main'\n"
                '  steps:\n'
                '    - uses: actions/checkout@v4\n'
                '    - run: ./scripts/deploy.sh'
            ),
            'note_es': 'Despliega automáticamente si los tests pasan.',
            'note_en': 'Deploys automatically if tests pass.',
        },
        'exercise_example': {
            'title_es': 'Linter check',
            'title_en': 'Linter check',
            'code': (
                'lint:\n'
                '  runs-on: ubuntu-latest\n'
                '  steps:\n'
                '    - uses: actions/checkout@v4\n'
                '    - uses: actions/setup-node@v4\n'
                '    - run: npm ci\n'
                '    - run: npm run lint'
            ),
            'note_es': 'Asegura calidad de código estática.',
            'note_en': 'Ensures static code quality.',
        },
        'what_es': 'Nos da feedback rápido sobre regresiones y acelera releases.',
        'what_en': 'Delivers fast feedback on regressions and accelerates releases.',
        'how_es': 'Define pipelines declarativos que compilen, prueben y desplieguen usando ambientes efímeros.',
        'how_en': 'Create declarative pipelines that build, test and deploy using ephemeral environments.',
    },
    {
        'term': 'Prisma',
        'translation': 'ORM tipado',
        'category': 'backend',
        'description_es': 'ORM moderno para TypeScript que genera cliente tipado y migraciones.',
        'description_en': 'Type-safe ORM for TypeScript that ships with generated client and migrations.',
        'aliases': ['prisma orm'],
        'tags': ['orm', 'database'],
        'example': {
            'title_es': 'Consulta tipada',
            'title_en': 'Typed query',
            'code': (
                'const term = await prisma.term.findUnique({\n'
                '  where: { slug },\n'
                '  include: { variants: true },\n'
                '});'
            ),
            'note_es': 'Typescript infiere el shape del resultado.',
            'note_en': 'TypeScript infers the return shape automatically.',
        },
        'second_example': {
            'title_es': 'Creación de registro',
            'title_en': 'Create record',
            'code': (
                'const newUser = await prisma.user.create({\n'
                '  data: {\n'
                "    email: 'alice@prisma.io',\n"
                "    name: 'Alice',\n"
                "    posts: { create: { title: 'Hello World' } },\n"
                '  },\n'
                '});'
            ),
            'note_es': 'Crea registros relacionados en una sola transacción.',
            'note_en': 'Creates related records in a single transaction.',
        },
        'exercise_example': {
            'title_es': 'Actualización condicional',
            'title_en': 'Conditional update',
            'code': (
                'const updatedUser = await prisma.user.update({\n'
                "  where: { email: 'alice@prisma.io' },\n"
                "  data: { name: 'Alice the Great' },\n"
                '});'
            ),
            'note_es': 'Actualiza un registro existente.',
            'note_en': 'Updates an existing record.',
        },
        'what_es': 'Resuelve el puente entre modelos y base de datos con DX amigable.',
        'what_en': 'Bridges schema and DB with great DX.',
        'how_es': 'Describe modelos en schema.prisma, ejecuta migrate dev y usa el cliente generado en servicios.',
        'how_en': 'Describe models in schema.prisma, run migrate dev and use the generated client inside services.',
        'language_override': 'ts',
    },
    {
        'term': 'REST',
        'translation': 'transferencia de estado representacional',
        'category': 'backend',
        'description_es': 'Estilo de arquitectura para diseñar servicios web basados en recursos y verbos HTTP.',
        'description_en': 'Architectural style for designing networked applications based on resources and HTTP verbs.',
        'aliases': ['restful', 'rest api'],
        'tags': ['api', 'http', 'architecture'],
        'example': {
            'title_es': 'Endpoint REST típico',
            'title_en': 'Typical REST endpoint',
            'code': (
                "app.get('/users/:id', async (req, res) => {\n"
                '  const user = await db.findUser(req.params.id);\n'
                "  if (!user) return res.status(404).json({ error: 'Not found' });\n"
                '  res.json(user);\n'
                '});'
            ),
            'note_es': 'Usa verbos estándar (GET) y códigos de estado (404, 200).',
            'note_en': 'Uses standard verbs (GET) and status codes (404, 200).',
        },
        'second_example': {
            'title_es': 'Recurso anidado',
            'title_en': 'Nested resource',
            'code': 'GET /users/123/posts\nGET /users/123/posts/456',
            'note_es': 'URLs jerárquicas representan relaciones.',
            'note_en': 'Hierarchical URLs represent relationships.',
        },
        'exercise_example': {
            'title_es': 'Crear recurso (POST)',
            'title_en': 'Create resource (POST)',
            'code': (
                'POST /users\n'
                'Content-Type: application/json\n'
                '\n'
                '{ "name": "John Doe", "email": "john@example.com" }'
            ),
            'note_es': 'POST crea nuevos recursos y retorna 201.',
            'note_en': 'POST creates new resources and returns 201.',
        },
        'what_es': 'Estandariza la comunicación entre cliente y servidor usando la infraestructura existente de la web.',
        'what_en': 'Standardizes client-server communication leveraging existing web infrastructure.',
        'how_es': 'Diseña recursos (URLs), usa verbos HTTP correctos (GET, POST, PUT, DELETE) y devuelve representaciones (JSON).',
        'how_en': 'Design resources (URLs), use proper HTTP verbs and return representations (JSON).',
    },
    {
        'term': 'html',
        'translation': 'elemento raíz HTML',
        'category': 'frontend',
        'description_es': 'Etiqueta raíz que envuelve todo el documento y define el idioma base.',
        'description_en': 'Root element that wraps the entire document and defines the base language.',
        'aliases': ['<html>', 'root element', 'html tag'],
        'tags': ['html', 'dom', 'document', 'a11y'],
        'example': {
            'title_es': 'Documento mínimo con idioma',
            'title_en': 'Minimal document with language',
            'code': '<!DOCTYPE html>\n<html lang="es">\n  <head>\n    <meta charset="UTF-8" />\n    <title>Diccionario Dev</title>\n  </head>\n  <body>\n    <p>Hola mundo</p>\n  </body>\n</html>',
            'note_es': 'El atributo lang habilita anuncios correctos en lectores de pantalla.',
            'note_en': 'The lang attribute helps screen readers announce content correctly.',
        },
        'second_example': {
            'title_es': 'Dirección y tema global',
            'title_en': 'Global direction and theme',
            'code': '<html lang="en" dir="ltr" data-theme="dark">\n  <head>\n    <meta name="viewport" content="width=device-width, initial-scale=1" />\n  </head>\n  <body>\n    <main>Contenido</main>\n  </body>\n</html>',
            'note_es': 'data-* y dir en html se heredan a todo el árbol DOM.',
            'note_en': 'data-* and dir on html cascade to the whole DOM tree.',
        },
        'exercise_example': {
            'title_es': 'Shell base para SPA',
            'title_en': 'Base shell for SPA',
            'code': '<!DOCTYPE html>\n<html lang="es" class="font-sans">\n  <head>\n    <meta charset="UTF-8" />\n    <meta name="viewport" content="width=device-width, initial-scale=1" />\n    <title>Panel</title>\n  </head>\n  <body>\n    <div id="app">Cargando...</div>\n  </body>\n</html>',
            'note_es': 'Prepara el nodo raíz para hidratar una app sin dependencias externas.',
            'note_en': 'Prepares the root node to hydrate an app without extra dependencies.',
        },
        'language_override': 'html',
        'what_es': 'Define el contenedor raíz del DOM y el idioma para accesibilidad y estilos globales.',
        'what_en': 'Defines the DOM root container and language for accessibility and global styles.',
        'how_es': 'Incluye siempre <!DOCTYPE html> y el atributo lang en la etiqueta html.',
        'how_en': 'Always include <!DOCTYPE html> and the lang attribute on the html tag.',
    },
    {
        'term': 'head',
        'translation': 'cabecera del documento',
        'category': 'frontend',
        'description_es': 'Sección que agrupa metadatos, enlaces a recursos y el título de la página.',
        'description_en': 'Section that holds metadata, resource links, and the page title.',
        'aliases': ['<head>', 'document head'],
        'tags': ['html', 'metadata', 'seo', 'performance'],
        'example': {
            'title_es': 'Head básico para layout responsivo',
            'title_en': 'Basic head for responsive layout',
            'code': '<head>\n  <meta charset="UTF-8" />\n  <meta name="viewport" content="width=device-width, initial-scale=1" />\n  <title>Dashboard</title>\n  <link rel="stylesheet" href="/styles/app.css" />\n</head>',
            'note_es': 'charset y viewport deben ir primero para que el navegador procese el documento correctamente.',
            'note_en': 'charset and viewport should be first so the browser parses the document correctly.',
        },
        'second_example': {
            'title_es': 'Optimización de fuentes y analytics',
            'title_en': 'Fonts and analytics optimization',
            'code': '<head>\n  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin />\n  <link rel="preload" href="/fonts/inter-var.woff2" as="font" type="font/woff2" crossorigin />\n  <link rel="icon" href="/favicon.ico" />\n  <title>Tienda | Marca</title>\n  <script src="/analytics.js" defer></script>\n</head>',
            'note_es': 'Los hints (preconnect/preload) reducen la latencia de recursos críticos.',
            'note_en': 'Hints like preconnect/preload cut latency for critical assets.',
        },
        'exercise_example': {
            'title_es': 'Head listo para PWA',
            'title_en': 'PWA-ready head',
            'code': '<head>\n  <meta charset="UTF-8" />\n  <meta name="viewport" content="width=device-width, initial-scale=1" />\n  <link rel="manifest" href="/manifest.webmanifest" />\n  <meta name="theme-color" content="#0f172a" />\n  <link rel="apple-touch-icon" href="/icons/icon-192.png" />\n  <title>App Offline</title>\n</head>',
            'note_es': 'Incluye manifest y theme-color para que el navegador trate la app como instalable.',
            'note_en': 'Add manifest and theme-color so the browser treats the app as installable.',
        },
        'language_override': 'html',
        'what_es': 'Centraliza los metadatos y recursos que afectan cómo se carga y presenta la página.',
        'what_en': 'Centralizes metadata and resources that drive how the page loads and is presented.',
        'how_es': 'Coloca charset y viewport al inicio; añade títulos, íconos y hints según tus necesidades.',
        'how_en': 'Place charset and viewport first; add titles, icons, and hints as needed.',
    },
    {
        'term': 'body',
        'translation': 'cuerpo del documento',
        'category': 'frontend',
        'description_es': 'Contenedor principal del contenido visible y de los manejadores de eventos de la página.',
        'description_en': 'Main container for visible content and page event handlers.',
        'aliases': ['<body>', 'document body'],
        'tags': ['html', 'dom', 'layout', 'a11y'],
        'example': {
            'title_es': 'Estructura semántica básica',
            'title_en': 'Basic semantic structure',
            'code': '<body>\n  <header>\n    <h1>Diccionario Dev</h1>\n    <nav>\n      <a href="/">Inicio</a>\n      <a href="/glosario">Glosario</a>\n    </nav>\n  </header>\n  <main>\n    <article>\n      <h2>Términos nuevos</h2>\n      <p>Explora conceptos claves.</p>\n    </article>\n  </main>\n  <footer>© 2024</footer>\n</body>',
            'note_es': 'Usa etiquetas semánticas para mejorar accesibilidad y SEO.',
            'note_en': 'Use semantic tags to improve accessibility and SEO.',
        },
        'second_example': {
            'title_es': 'Body con tema y atajo de acceso',
            'title_en': 'Body with theme and skip link',
            'code': '<body class="bg-slate-50 text-slate-900" data-theme="light">\n  <a href="#contenido" class="sr-only focus:not-sr-only">Saltar al contenido</a>\n  <main id="contenido">\n    <p>Contenido principal.</p>\n  </main>\n</body>',
            'note_es': 'La clase sr-only permite accesos directos visibles al enfocar.',
            'note_en': 'sr-only links become visible on focus for keyboard navigation.',
        },
        'exercise_example': {
            'title_es': 'Body listo para hidratar',
            'title_en': 'Hydration-ready body',
            'code': '<body>\n  <noscript>Esta app requiere JavaScript.</noscript>\n  <div id="root">Cargando...</div>\n  <script type="module" src="/main.js" defer></script>\n</body>',
            'note_es': 'Separa un contenedor root y agrega fallback sin JS.',
            'note_en': 'Separates a root container and adds a no-JS fallback.',
        },
        'language_override': 'html',
        'what_es': 'Agrupa todo lo que el usuario ve e interactúa dentro del documento.',
        'what_en': 'Wraps everything the user sees and interacts with in the document.',
        'how_es': 'Estructura el body con regiones semánticas y deja un nodo root para apps SPA/SSR.',
        'how_en': 'Structure body with semantic regions and leave a root node for SPA/SSR apps.',
    },
    {
        'term': 'base',
        'translation': 'URL base del documento',
        'category': 'frontend',
        'description_es': 'Etiqueta que define la URL y el target por defecto para enlaces y rutas relativas.',
        'description_en': 'Tag that sets the default URL and target for relative links and resources.',
        'aliases': ['<base>', 'base href'],
        'tags': ['html', 'routing', 'seo'],
        'example': {
            'title_es': 'Base para abrir enlaces en nueva pestaña',
            'title_en': 'Base to open links in new tab',
            'code': '<head>\n  <base href="https://ejemplo.com/app/" target="_blank" />\n  <link rel="stylesheet" href="styles.css" />\n</head>\n<body>\n  <a href="docs/guia.pdf">Ver guía</a>\n</body>',
            'note_es': 'El target global aplica a todos los anchors sin target explícito.',
            'note_en': 'The global target applies to all anchors without an explicit target.',
        },
        'second_example': {
            'title_es': 'Base para rutas relativas en SPA',
            'title_en': 'Base for relative SPA routes',
            'code': '<head>\n  <base href="/dashboard/" />\n</head>\n<body>\n  <a href="reports">Reportes</a>\n  <img src="assets/avatar.png" alt="Avatar" />\n</body>',
            'note_es': 'Coloca base al inicio del head para que el navegador resuelva rutas correctamente.',
            'note_en': 'Place base at the start of head so the browser resolves routes correctly.',
        },
        'exercise_example': {
            'title_es': 'Base por entorno',
            'title_en': 'Environment-driven base',
            'code': '<head>\n  <!-- Cambia href en build según entorno -->\n  <base href="%PUBLIC_URL%/" />\n  <link rel="stylesheet" href="app.css" />\n</head>',
            'note_es': 'En builds estáticos puedes interpolar la URL pública para servir desde subdirectorios.',
            'note_en': 'Static builds can interpolate the public URL to serve from subdirectories.',
        },
        'language_override': 'html',
        'what_es': 'Controla cómo se resuelven los enlaces relativos y el target predeterminado del documento.',
        'what_en': 'Controls how relative links resolve and sets the document\'s default target.',
        'how_es': 'Declara base una sola vez al inicio del head y evita cambiarla dinámicamente.',
        'how_en': 'Declare base only once at the top of head and avoid changing it at runtime.',
    },
    {
        'term': 'link',
        'translation': 'enlace a recursos',
        'category': 'frontend',
        'description_es': 'Elemento vacío que referencia recursos externos como estilos, íconos o hints de carga.',
        'description_en': 'Void element referencing external resources like styles, icons, or loading hints.',
        'aliases': ['<link>', 'stylesheet tag'],
        'tags': ['html', 'performance', 'css', 'preload'],
        'example': {
            'title_es': 'Cargar una hoja de estilos',
            'title_en': 'Load a stylesheet',
            'code': '<head>\n  <link rel="stylesheet" href="/css/app.css" />\n</head>',
            'note_es': 'rel="stylesheet" bloquea el render hasta descargar el CSS.',
            'note_en': 'rel="stylesheet" blocks render until CSS is downloaded.',
        },
        'second_example': {
            'title_es': 'Optimizar fuentes con preload',
            'title_en': 'Optimize fonts with preload',
            'code': '<head>\n  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin />\n  <link rel="preload" href="/fonts/inter-var.woff2" as="font" type="font/woff2" crossorigin />\n  <link rel="stylesheet" href="/css/typography.css" />\n</head>',
            'note_es': 'Preload reduce el CLS al adelantar la descarga de fuentes críticas.',
            'note_en': 'Preload reduces CLS by fetching critical fonts early.',
        },
        'exercise_example': {
            'title_es': 'Íconos y theme alterno',
            'title_en': 'Icons and alternate theme',
            'code': '<head>\n  <link rel="icon" href="/favicon.ico" />\n  <link rel="apple-touch-icon" href="/icons/icon-192.png" />\n  <link rel="alternate stylesheet" title="Dark" href="/css/dark.css" />\n</head>',
            'note_es': 'Puedes ofrecer un stylesheet alterno para cambios de tema manuales.',
            'note_en': 'You can expose an alternate stylesheet for manual theme switching.',
        },
        'language_override': 'html',
        'what_es': 'Permite declarar recursos externos y pistas de carga que afectan el rendimiento.',
        'what_en': 'Lets you declare external assets and loading hints that affect performance.',
        'how_es': 'Usa rel adecuado (stylesheet, preload, preconnect) y define crossorigin cuando aplica.',
        'how_en': 'Use the proper rel (stylesheet, preload, preconnect) and set crossorigin when needed.',
    },
    {
        'term': 'meta',
        'translation': 'metadatos del documento',
        'category': 'frontend',
        'description_es': 'Etiqueta para definir charset, viewport, SEO, social cards y preferencias de color.',
        'description_en': 'Tag to declare charset, viewport, SEO, social cards, and color preferences.',
        'aliases': ['<meta>', 'meta tag'],
        'tags': ['html', 'seo', 'a11y', 'performance'],
        'example': {
            'title_es': 'Metas esenciales',
            'title_en': 'Essential metas',
            'code': '<head>\n  <meta charset="UTF-8" />\n  <meta name="viewport" content="width=device-width, initial-scale=1" />\n  <meta name="description" content="Glosario práctico para devs." />\n</head>',
            'note_es': 'charset y viewport deben estar al inicio; description mejora el snippet en buscadores.',
            'note_en': 'Place charset and viewport first; description improves search snippets.',
        },
        'second_example': {
            'title_es': 'Tarjetas sociales completas',
            'title_en': 'Complete social cards',
            'code': '<head>\n  <meta property="og:title" content="Diccionario Dev" />\n  <meta property="og:description" content="Conceptos clave explicados con ejemplos." />\n  <meta property="og:image" content="https://ejemplo.com/og-card.png" />\n  <meta name="twitter:card" content="summary_large_image" />\n</head>',
            'note_es': 'Open Graph y Twitter card controlan el preview al compartir enlaces.',
            'note_en': 'Open Graph and Twitter cards control previews when sharing links.',
        },
        'exercise_example': {
            'title_es': 'Preferencias de color y PWA',
            'title_en': 'Color preferences and PWA',
            'code': '<head>\n  <meta name="theme-color" content="#0f172a" />\n  <meta name="color-scheme" content="light dark" />\n  <meta http-equiv="Content-Security-Policy" content="default-src \'self\';" />\n</head>',
            'note_es': 'theme-color y color-scheme ajustan UI del navegador; CSP fortalece seguridad.',
            'note_en': 'theme-color and color-scheme tune browser UI; CSP hardens security.',
        },
        'language_override': 'html',
        'what_es': 'Comunica al navegador y a los buscadores cómo interpretar y mostrar la página.',
        'what_en': 'Tells the browser and crawlers how to interpret and present the page.',
        'how_es': 'Define charset/viewport primero y añade metas específicas para SEO, social y seguridad.',
        'how_en': 'Define charset/viewport first and add targeted metas for SEO, social, and security.',
    },
    {
        'term': 'style-element',
        'translation': 'etiqueta style',
        'category': 'frontend',
        'description_es': 'Elemento que aloja CSS embebido dentro del documento sin archivo externo.',
        'description_en': 'Element that hosts embedded CSS inside the document without an external file.',
        'aliases': ['<style>', 'embedded styles'],
        'tags': ['html', 'css', 'inline styles'],
        'example': {
            'title_es': 'Estilo rápido en el head',
            'title_en': 'Quick style in head',
            'code': '<head>\n  <style>\n    button {\n      background: #0f172a;\n      color: white;\n      padding: 0.75rem 1rem;\n      border-radius: 0.5rem;\n    }\n  </style>\n</head>',
            'note_es': 'Ideal para prototipos o estilos críticos pequeños.',
            'note_en': 'Great for prototypes or small critical styles.',
        },
        'second_example': {
            'title_es': 'Tema con atributos de datos',
            'title_en': 'Theme using data attributes',
            'code': '<style>\n  [data-theme="dark"] body { background: #0b1221; color: #e2e8f0; }\n  [data-theme="light"] body { background: #ffffff; color: #0f172a; }\n</style>',
            'note_es': 'Puedes cambiar el tema aplicando data-theme en html o body.',
            'note_en': 'Switch themes by toggling data-theme on html or body.',
        },
        'exercise_example': {
            'title_es': 'CSS crítico inline',
            'title_en': 'Inline critical CSS',
            'code': '<style>\n  /* Layout principal para evitar FOUC */\n  body { margin: 0; font-family: system-ui, -apple-system, sans-serif; }\n  main { max-width: 960px; margin: 0 auto; padding: 1.5rem; }\n  .card { border: 1px solid #e2e8f0; border-radius: 0.75rem; padding: 1rem; }\n</style>',
            'note_es': 'Coloca estilos críticos inline para mejorar el LCP inicial.',
            'note_en': 'Inline critical styles to improve initial LCP.',
        },
        'language_override': 'html',
        'what_es': 'Permite definir CSS rápido o crítico sin dependencias externas.',
        'what_en': 'Lets you define quick or critical CSS without external dependencies.',
        'how_es': 'Ubica style en el head y evita CSS extenso inline; migra a archivos cuando crezca.',
        'how_en': 'Place style in head and avoid large inline CSS; move to files as it grows.',
    },
    {
        'term': 'title',
        'translation': 'título del documento',
        'category': 'frontend',
        'description_es': 'Texto que se muestra en la pestaña del navegador y sirve como título principal de la página.',
        'description_en': 'Text shown in the browser tab and used as the page\'s primary title.',
        'aliases': ['<title>', 'document title'],
        'tags': ['html', 'seo', 'ux'],
        'example': {
            'title_es': 'Título claro para dashboard',
            'title_en': 'Clear dashboard title',
            'code': '<head>\n  <title>Dashboard | Diccionario Dev</title>\n</head>',
            'note_es': 'Incluye el contexto del producto para que sea reconocible en la pestaña.',
            'note_en': 'Include product context so the tab is recognizable.',
        },
        'second_example': {
            'title_es': 'Título por sección',
            'title_en': 'Section-based title',
            'code': '<head>\n  <title>Perfil de usuario | App</title>\n</head>',
            'note_es': 'Combina sección + marca para mejorar SEO y usabilidad.',
            'note_en': 'Combine section + brand to improve SEO and usability.',
        },
        'exercise_example': {
            'title_es': 'Título para landing',
            'title_en': 'Landing title',
            'code': '<head>\n  <title>Aprende HTML en minutos</title>\n  <meta name="description" content="Guías cortas y ejemplos listos para usar." />\n</head>',
            'note_es': 'Alinea el título con la meta description para evitar discrepancias en buscadores.',
            'note_en': 'Align the title with meta description to avoid mismatches in search results.',
        },
        'language_override': 'html',
        'what_es': 'Nombra la página en la pestaña del navegador y aporta señal primaria a SEO.',
        'what_en': 'Names the page in the browser tab and gives primary SEO signal.',
        'how_es': 'Ponlo dentro de head y mantenlo corto (50–60 caracteres).',
        'how_en': 'Place it inside head and keep it concise (50–60 characters).',
    },
    {
        'term': 'script',
        'translation': 'carga de JavaScript',
        'category': 'frontend',
        'description_es': 'Etiqueta para ejecutar o enlazar scripts controlando estrategia con defer, async o type=module.',
        'description_en': 'Tag to execute or load scripts while controlling strategy with defer, async, or type=module.',
        'aliases': ['<script>', 'script tag'],
        'tags': ['html', 'javascript', 'performance', 'security'],
        'example': {
            'title_es': 'Script módulo con defer',
            'title_en': 'Module script with defer',
            'code': '<body>\n  <script type="module" src="/js/app.js" defer></script>\n</body>',
            'note_es': 'type=module usa ES modules y defer evita bloquear el render.',
            'note_en': 'type=module leverages ES modules and defer avoids render blocking.',
        },
        'second_example': {
            'title_es': 'Config inline segura',
            'title_en': 'Safe inline config',
            'code': '<head>\n  <script nonce="abc123">\n    window.appConfig = { apiBase: "/api" };\n  </script>\n</head>',
            'note_es': 'Usa nonce o hash si tienes CSP para permitir scripts inline controlados.',
            'note_en': 'Use a nonce or hash with CSP to allow controlled inline scripts.',
        },
        'exercise_example': {
            'title_es': 'Carga diferida y fallback',
            'title_en': 'Deferred load with fallback',
            'code': '<body>\n  <div id="root">Cargando...</div>\n  <script src="https://cdn.example.com/react.production.min.js" crossorigin defer></script>\n  <script src="/js/app.bundle.js" defer></script>\n  <noscript>Activa JavaScript para usar la aplicación.</noscript>\n</body>',
            'note_es': 'Agrupa scripts al final del body y agrega noscript como respaldo.',
            'note_en': 'Group scripts at the end of body and add noscript as fallback.',
        },
        'language_override': 'html',
        'what_es': 'Inyecta JavaScript en la página controlando bloqueo, integridad y seguridad.',
        'what_en': 'Injects JavaScript into the page while controlling blocking, integrity, and security.',
        'how_es': 'Prefiere type=module + defer; aplica nonce/CSP y coloca scripts al final cuando sean clásicos.',
        'how_en': 'Prefer type=module + defer; apply nonce/CSP and place classic scripts at the end.',
    },
    {
        'term': 'noscript',
        'translation': 'contenido sin JavaScript',
        'category': 'frontend',
        'description_es': 'Bloque alternativo que se muestra cuando el navegador no ejecuta JavaScript.',
        'description_en': 'Alternative block displayed when the browser does not run JavaScript.',
        'aliases': ['<noscript>', 'no script fallback'],
        'tags': ['html', 'progressive enhancement', 'a11y'],
        'example': {
            'title_es': 'Aviso de funcionalidad limitada',
            'title_en': 'Limited functionality notice',
            'code': '<body>\n  <noscript>\n    <div class="alert">Activa JavaScript para usar todas las funciones.</div>\n  </noscript>\n</body>',
            'note_es': 'Informa a usuarios sin JS sobre las limitaciones.',
            'note_en': 'Let no-JS users know about limitations.',
        },
        'second_example': {
            'title_es': 'Estilos alternos sin JS',
            'title_en': 'Alternate styles without JS',
            'code': '<head>\n  <noscript>\n    <style>\n      .requires-js { display: none; }\n    </style>\n  </noscript>\n</head>',
            'note_es': 'Oculta UI que depende de JS para evitar confusión.',
            'note_en': 'Hide JS-dependent UI to avoid confusion.',
        },
        'exercise_example': {
            'title_es': 'Fallback de datos estáticos',
            'title_en': 'Static data fallback',
            'code': '<body>\n  <section class="requires-js">\n    <div id="app">Cargando app...</div>\n  </section>\n  <noscript>\n    <article>\n      <h1>Versión estática</h1>\n      <p>Descarga el PDF con la guía completa.</p>\n      <a href="/guia.pdf">Abrir guía</a>\n    </article>\n  </noscript>\n</body>',
            'note_es': 'Ofrece una ruta alternativa para acceso a contenido esencial.',
            'note_en': 'Provide an alternate path to essential content.',
        },
        'language_override': 'html',
        'what_es': 'Comunica contenido alternativo cuando JS está deshabilitado o bloqueado.',
        'what_en': 'Communicates alternate content when JS is disabled or blocked.',
        'how_es': 'Coloca noscript cerca de la UI dependiente y ofrece acciones claras.',
        'how_en': 'Place noscript near JS-dependent UI and offer clear actions.',
    },
    {
        'term': 'template',
        'translation': 'plantilla HTML reutilizable',
        'category': 'frontend',
        'description_es': 'Contenedor inerte que guarda marcado reutilizable hasta que se instancia vía JavaScript.',
        'description_en': 'Inactive container that stores reusable markup until instantiated via JavaScript.',
        'aliases': ['<template>', 'html template'],
        'tags': ['html', 'dom', 'web components'],
        'example': {
            'title_es': 'Clonar tarjeta desde template',
            'title_en': 'Clone card from template',
            'code': '<template id="card-template">\n  <article class="card">\n    <h3 class="title"></h3>\n    <p class="body"></p>\n  </article>\n</template>\n<script>\n  const tpl = document.getElementById("card-template");\n  const card = tpl.content.cloneNode(true);\n  card.querySelector(".title").textContent = "Nueva entrada";\n  card.querySelector(".body").textContent = "Detalle del término.";\n  document.body.appendChild(card);\n</script>',
            'note_es': 'template.content no se renderiza hasta clonarlo y adjuntarlo al DOM.',
            'note_en': 'template.content stays inert until cloned and attached to the DOM.',
        },
        'second_example': {
            'title_es': 'Renderizar listas dinámicas',
            'title_en': 'Render dynamic lists',
            'code': '<template id="item-template">\n  <li class="item">\n    <span class="label"></span>\n  </li>\n</template>\n<ul id="list"></ul>\n<script>\n  const tpl = document.getElementById("item-template");\n  const list = document.getElementById("list");\n  ["HTML", "CSS", "JS"].forEach((label) => {\n    const node = tpl.content.cloneNode(true);\n    node.querySelector(".label").textContent = label;\n    list.appendChild(node);\n  });\n</script>',
            'note_es': 'Evita innerHTML manual y conserva estructura consistente.',
            'note_en': 'Avoids manual innerHTML while keeping structure consistent.',
        },
        'exercise_example': {
            'title_es': 'Modal reutilizable',
            'title_en': 'Reusable modal',
            'code': '<template id="modal-template">\n  <div class="backdrop">\n    <div class="modal">\n      <h2 class="title"></h2>\n      <p class="body"></p>\n      <button class="close">Cerrar</button>\n    </div>\n  </div>\n</template>\n<script>\n  function openModal(title, body) {\n    const tpl = document.getElementById("modal-template");\n    const fragment = tpl.content.cloneNode(true);\n    fragment.querySelector(".title").textContent = title;\n    fragment.querySelector(".body").textContent = body;\n    fragment.querySelector(".close").addEventListener("click", () => {\n      document.body.removeChild(modalNode);\n    });\n    const modalNode = fragment.firstElementChild;\n    document.body.appendChild(modalNode);\n  }\n</script>',
            'note_es': 'Centraliza el HTML de modales y solo rellena textos dinámicos al abrir.',
            'note_en': 'Keeps modal HTML centralized and only fills dynamic text on open.',
        },
        'language_override': 'html',
        'what_es': 'Guarda marcado listo para clonar sin ejecutarse hasta que lo uses.',
        'what_en': 'Stores markup ready to clone without executing until you use it.',
        'how_es': 'Define el template en el HTML y clónalo con template.content.cloneNode(true) antes de inyectarlo.',
        'how_en': 'Define the template in HTML and clone it with template.content.cloneNode(true) before injecting.',
    },
    {
        'term': 'slot',
        'translation': 'ranura de contenido',
        'category': 'frontend',
        'description_es': 'Marcador dentro del shadow DOM donde se proyecta contenido hijo de un componente.',
        'description_en': 'Placeholder inside shadow DOM where child content is projected.',
        'aliases': ['<slot>', 'web components slot'],
        'tags': ['html', 'web components', 'shadow dom'],
        'example': {
            'title_es': 'Slot por defecto y nombrado',
            'title_en': 'Default and named slot',
            'code': '<template id="card-shell">\n  <style>\n    .card { border: 1px solid #e2e8f0; padding: 1rem; border-radius: 0.75rem; }\n    .title { font-weight: 700; }\n  </style>\n  <article class="card">\n    <h3 class="title"><slot name="title">Título</slot></h3>\n    <p><slot>Contenido por defecto</slot></p>\n    <div class="actions"><slot name="actions"></slot></div>\n  </article>\n</template>\n<script>\n  class AppCard extends HTMLElement {\n    constructor() {\n      super();\n      const root = this.attachShadow({ mode: "open" });\n      const tpl = document.getElementById("card-shell");\n      root.appendChild(tpl.content.cloneNode(true));\n    }\n  }\n  customElements.define("app-card", AppCard);\n</script>\n<app-card>\n  <span slot="title">Resumen</span>\n  <span>Detalle corto.</span>\n  <button slot="actions">Acción</button>\n</app-card>',
            'note_es': 'slot proyecta nodos hijos dentro del shadow DOM preservando accesibilidad.',
            'note_en': 'slot projects child nodes into shadow DOM while keeping accessibility.',
        },
        'second_example': {
            'title_es': 'Fallback para slot vacío',
            'title_en': 'Fallback for empty slot',
            'code': '<template id="pill-shell">\n  <style>.pill { padding: 0.25rem 0.75rem; border-radius: 999px; background: #e2e8f0; }</style>\n  <span class="pill"><slot>Estado pendiente</slot></span>\n</template>\n<script>\n  class AppPill extends HTMLElement {\n    constructor() {\n      super();\n      const root = this.attachShadow({ mode: "open" });\n      const tpl = document.getElementById("pill-shell");\n      root.appendChild(tpl.content.cloneNode(true));\n    }\n  }\n  customElements.define("app-pill", AppPill);\n</script>\n<app-pill></app-pill>',
            'note_es': 'Si no se pasa contenido, se muestra el fallback definido dentro del slot.',
            'note_en': 'If no content is provided, the fallback defined inside the slot is rendered.',
        },
        'exercise_example': {
            'title_es': 'Slot para layout compuesto',
            'title_en': 'Slot for composed layout',
            'code': '<template id="panel-shell">\n  <style>\n    .panel { display: grid; gap: 0.5rem; padding: 1rem; border: 1px solid #cbd5e1; }\n    .header { display: flex; justify-content: space-between; align-items: center; }\n  </style>\n  <section class="panel">\n    <header class="header">\n      <slot name="title">Panel</slot>\n      <slot name="toolbar"></slot>\n    </header>\n    <div class="content"><slot></slot></div>\n  </section>\n</template>\n<app-panel>\n  <h2 slot="title">Usuarios</h2>\n  <button slot="toolbar">Refrescar</button>\n  <p>Lista de usuarios...</p>\n</app-panel>',
            'note_es': 'Define slots por región para recomponer layouts sin duplicar HTML.',
            'note_en': 'Define region-specific slots to recompose layouts without duplicating HTML.',
        },
        'language_override': 'html',
        'what_es': 'Expone puntos de inserción en web components para que el consumidor personalice el contenido.',
        'what_en': 'Exposes insertion points in web components so consumers customize content.',
        'how_es': 'Declara slots en tu shadow DOM y usa atributos slot en el contenido hijo que proyectas.',
        'how_en': 'Declare slots in your shadow DOM and use slot attributes on projected child content.',
    },
]

"""CSS property catalog, authored in a reduced Spanish-only shape.

``css_entry_to_raw`` lifts each entry into the full raw-term mapping the
normalizer expects.
"""

CSS_TERMS = [
    {
        'term': 'align-items',
        'translation': 'alinear elementos verticalmente dentro de un contenedor flex',
        'description': 'alinear elementos verticalmente dentro de un contenedor basado en flex o grid',
        'aliases': ['alignItems'],
        'example': {
            'title': 'Cards centradas verticalmente',
            'code': 'section.cards {\n  display: flex;\n  align-items: center;\n  min-height: 280px;\n}',
            'note': 'Se usa en contenedores flex y grid para ajustar el eje cruzado.',
        },
    },
    {
        'term': 'align-content',
        'translation': 'alinear líneas completas en flexbox o grid',
        'description': 'controlar el alineado de filas completas dentro de contenedores con varias líneas',
        'aliases': ['alignContent'],
        'example': {
            'title': 'Grid con espacio inferior',
            'code': 'main.gallery {\n  display: flex;\n  flex-wrap: wrap;\n  align-content: space-between;\n  height: 400px;\n}',
            'note': 'Solo aplica cuando hay varias líneas generadas por wrap.',
        },
    },
    {
        'term': 'align-self',
        'translation': 'alinear un solo ítem individual',
        'description': 'sobrescribir el alineado vertical de un elemento específico dentro de un flex/grid',
        'aliases': ['alignSelf'],
        'example': {
            'title': 'Botón destacado',
            'code': '.actions {\n  display: flex;\n  align-items: center;\n}\n.actions button.cta {\n  align-self: flex-end;\n}',
        },
    },
    {
        'term': 'animation',
        'translation': 'animación controlada con keyframes',
        'description': 'asignar la animación definida por @keyframes a un elemento',
        'aliases': ['animation shorthand'],
        'example': {
            'title': 'Fade in reusable',
            'code': '.toast {\n  animation: fade-in 400ms ease-out both;\n}\n@keyframes fade-in {\n  from { opacity: 0; transform: translateY(12px); }\n  to { opacity: 1; transform: translateY(0); }\n}',
        },
    },
    {
        'term': 'animation-delay',
        'translation': 'tiempo antes de que empiece una animación',
        'description': 'definir cuánto debe esperar una animación antes de ejecutarse',
        'aliases': ['animationDelay'],
        'example': {
            'title': 'Escalonar elementos',
            'code': '.list-item {\n  animation: enter 300ms ease-out;\n  animation-delay: calc(var(--index) * 80ms);\n}',
        },
    },
    {
        'term': 'animation-duration',
        'translation': 'cuánto dura la animación',
        'description': 'indicar la duración total de una animación en milisegundos o segundos',
        'aliases': ['animationDuration'],
        'example': {
            'title': 'Loading lento',
            'code': '.spinner {\n  animation: rotate 1.2s linear infinite;\n}',
        },
    },
    {
        'term': 'animation-iteration-count',
        'translation': 'cuántas veces se repite la animación',
        'description': 'definir el número de repeticiones de una animación',
        'aliases': ['animationIterationCount'],
        'example': {
            'title': 'Sólo una vez',
            'code': '.modal {\n  animation: drop-in 500ms ease-out;\n  animation-iteration-count: 1;\n}',
        },
    },
    {
        'term': 'auto',
        'translation': 'valor automático',
        'description': 'delegar en el navegador el cálculo del valor más adecuado',
        'example': {
            'title': 'Centrar con margin auto',
            'code': '.card {\n  width: min(480px, 100%);\n  margin: 0 auto;\n}',
            'note': 'Funciona como valor en múltiples propiedades.',
        },
        'how': 'Úsalo como valor en propiedades soportadas (margin, width, grid, etc.) para dejar que el navegador calcule el tamaño ideal.',
    },
    {
        'term': 'background',
        'translation': 'propiedad shorthand para el fondo',
        'description': 'establecer color, imagen, posición y repetición del fondo en una sola declaración',
        'aliases': ['background shorthand'],
        'example': {
            'title': 'Hero con degradado',
            'code': '.hero {\n  background: linear-gradient(135deg, #111, #2d2dff) center/cover no-repeat;\n}',
        },
    },
    {
        'term': 'background-color',
        'translation': 'color de fondo',
        'description': 'definir el color sólido que rellena el fondo del elemento',
        'aliases': ['backgroundColor'],
        'example': {
            'title': 'Card contrastada',
            'code': '.card {\n  background-color: #0f172a;\n  color: #e2e8f0;\n}',
        },
    },
    {
        'term': 'background-image',
        'translation': 'imagen de fondo',
        'description': 'aplicar imágenes o gradientes al fondo',
        'aliases': ['backgroundImage'],
        'example': {
            'title': 'Textura repetida',
            'code': 'body {\n  background-image: url(/textures/noise.png);\n}',
            'note': 'Acepta rutas, data URIs o gradientes.',
        },
    },
    {
        'term': 'background-size',
        'translation': 'tamaño del fondo',
        'description': 'controlar cómo se escala la imagen de fondo',
        'aliases': ['backgroundSize'],
        'example': {
            'title': 'Cover en hero',
            'code': '.hero {\n  background-image: url(/images/team.jpg);\n  background-size: cover;\n}',
        },
    },
    {
        'term': 'border',
        'translation': 'borde',
        'description': 'definir grosor, estilo y color del borde',
        'aliases': ['border shorthand'],
        'example': {
            'title': 'Tarjeta con borde',
            'code': '.card {\n  border: 1px solid rgba(148, 163, 184, 0.3);\n}',
        },
    },
    {
        'term': 'border-radius',
        'translation': 'esquinas redondeadas',
        'description': 'redondear las esquinas de la caja',
        'aliases': ['borderRadius'],
        'example': {
            'title': 'Avatar circular',
            'code': '.avatar {\n  width: 64px;\n  height: 64px;\n  border-radius: 999px;\n}',
        },
    },
    {
        'term': 'box-shadow',
        'translation': 'sombra del elemento',
        'description': 'aplicar sombras difusas o duras a la caja',
        'aliases': ['boxShadow'],
        'example': {
            'title': 'Elevación suave',
            'code': '.panel {\n  box-shadow: 0 20px 40px -25px rgba(15, 23, 42, 0.8);\n}',
        },
    },
    {
        'term': 'box-sizing',
        'translation': 'cómo se calcula el tamaño de la caja',
        'description': 'definir si width/height incluyen padding y borde',
        'aliases': ['boxSizing'],
        'example': {
            'title': 'Border-box global',
            'code': '*, *::before, *::after {\n  box-sizing: border-box;\n}',
            'note': 'Usa border-box para layout predecible.',
        },
    },
    {
        'term': 'calc',
        'translation': 'función para calcular valores',
        'description': 'combinar unidades y operaciones matemáticas directamente en CSS',
        'aliases': ['calc()'],
        'example': {
            'title': 'Ancho adaptable',
            'code': '.sidebar {\n  width: calc(100% - 320px);\n}',
        },
        'how': 'Escribe calc(valor + valor) respetando los espacios alrededor de los operadores para realizar ajustes dinámicos.',
    },
    {
        'term': 'class selector',
        'translation': 'selector de clase (.clase)',
        'description': 'aplicar estilos a elementos que comparten una clase',
        'aliases': ['selector de clase', '.class'],
        'example': {
            'title': 'Selector reusable',
            'code': '.badge {\n  font-size: 0.75rem;\n  padding: 0.125rem 0.5rem;\n  border-radius: 999px;\n}',
            'note': 'Se invoca desde el HTML con class="badge".',
        },
        'how': 'Prefija el nombre con un punto (.mi-clase) y úsalo para agrupar estilos reutilizables.',
    },
    {
        'term': 'color',
        'translation': 'color del texto',
        'description': 'definir el color del contenido textual',
        'example': {
            'title': 'Texto secundario',
            'code': 'p.helper {\n  color: #94a3b8;\n}',
        },
    },
    {
        'term': 'column',
        'translation': 'columna',
        'description': 'organizar contenido en columnas dentro de layout flex/grid o propiedades multi-column',
        'example': {
            'title': 'Flex en columna',
            'code': '.stack {\n  display: flex;\n  flex-direction: column;\n  gap: 1rem;\n}',
            'note': 'También aplica al valor column en flex-direction.',
        },
        'what': 'Lo usamos para estructurar elementos de arriba hacia abajo dentro de layouts responsivos.',
    },
    {
        'term': 'container',
        'translation': 'contenedor',
        'description': 'elemento que agrupa contenido y define límites o medidas',
        'example': {
            'title': 'Wrapper central',
            'code': '.container {\n  width: min(1200px, 100% - 2rem);\n  margin: 0 auto;\n}',
        },
        'what': 'Lo empleamos para envolver secciones y controlar el ancho máximo.',
        'how': 'Define una clase container con márgenes automáticos y paddings laterales para mantener la lectura.',
    },
    {
        'term': 'cursor',
        'translation': 'puntero del mouse',
        'description': 'indicar el tipo de cursor que debe mostrarse sobre un elemento interactivo',
        'example': {
            'title': 'Botón deshabilitado',
            'code': '.button[disabled] {\n  cursor: not-allowed;\n  opacity: 0.5;\n}',
        },
    },
    {
        'term': 'display',
        'translation': 'cómo se muestra un elemento',
        'description': 'definir el modelo de caja (block, inline, flex, grid, etc.)',
        'example': {
            'title': 'Layout flexible',
            'code': '.layout {\n  display: grid;\n  grid-template-columns: 280px 1fr;\n  gap: 2rem;\n}',
        },
    },
    {
        'term': 'direction',
        'translation': 'dirección del texto o flex',
        'description': 'configurar el flujo del texto o del layout (ltr, rtl)',
        'example': {
            'title': 'Soporte RTL',
            'code': '[dir="rtl"] .breadcrumb {\n  direction: rtl;\n}',
            'note': 'Útil en idiomas de derecha a izquierda.',
        },
    },
    {
        'term': 'dominant-baseline',
        'translation': 'línea base dominante en SVG',
        'description': 'alinear texto SVG respecto a su baseline principal',
        'example': {
            'title': 'Texto centrado en SVG',
            'code': '<text dominant-baseline="middle" text-anchor="middle">\n  Métrica\n</text>',
            'note': 'Solo aplica dentro de SVG.',
        },
        'what': 'Lo empleamos para alinear texto dentro de gráficos SVG sin cálculos manuales.',
        'how': 'Combina dominant-baseline con text-anchor para ubicar etiquetas en el lienzo SVG.',
    },
    {
        'term': 'em',
        'translation': 'unidad relativa al tamaño del texto padre',
        'description': 'medir basado en el font-size del elemento padre inmediato',
        'example': {
            'title': 'Padding relativo',
            'code': '.tag {\n  font-size: 0.875rem;\n  padding: 0.5em 1.5em;\n}',
        },
    },
    {
        'term': 'flex',
        'translation': 'diseño flexible',
        'description': 'crear contenedores flexibles basados en ejes',
        'example': {
            'title': 'Fila responsiva',
            'code': '.toolbar {\n  display: flex;\n  gap: 0.75rem;\n}',
        },
    },
    {
        'term': 'flex-direction',
        'translation': 'dirección del eje flex',
        'description': 'definir si los ítems se acomodan en fila o columna',
        'aliases': ['flexDirection'],
        'example': {
            'title': 'Stack adaptable',
            'code': '.stack {\n  display: flex;\n  flex-direction: column;\n}',
        },
    },
    {
        'term': 'flex-wrap',
        'translation': 'permitir que los elementos salten de línea',
        'description': 'autorizar que los ítems flex formen varias líneas',
        'aliases': ['flexWrap'],
        'example': {
            'title': 'Chips responsivos',
            'code': '.filters {\n  display: flex;\n  flex-wrap: wrap;\n  gap: 0.5rem;\n}',
        },
    },
    {
        'term': 'flex-grow',
        'translation': 'cuánto crece un elemento',
        'description': 'indicar qué proporción del espacio sobrante toma cada ítem',
        'aliases': ['flexGrow'],
        'example': {
            'title': 'Columna expansible',
            'code': '.sidebar { flex-grow: 1; }\n.content { flex-grow: 3; }',
        },
    },
    {
        'term': 'flex-shrink',
        'translation': 'cuánto se encoge un elemento',
        'description': 'definir qué tanto puede reducirse un ítem al faltar espacio',
        'aliases': ['flexShrink'],
        'example': {
            'title': 'Evitar encogimiento',
            'code': '.logo {\n  flex-shrink: 0;\n}',
        },
    },
    {
        'term': 'flex-basis',
        'translation': 'tamaño base del ítem',
        'description': 'establecer el tamaño inicial de un ítem flex antes de distribuir espacio',
        'aliases': ['flexBasis'],
        'example': {
            'title': 'Tarjetas iguales',
            'code': '.card {\n  flex: 1 1 220px;\n  flex-basis: 220px;\n}',
        },
    },
    {
        'term': 'float',
        'translation': 'flotar a la izquierda o derecha',
        'description': 'sacar un elemento del flujo normal para envolver texto',
        'example': {
            'title': 'Imagen flotante',
            'code': '.article img {\n  float: right;\n  margin-left: 1rem;\n}',
        },
    },
    {
        'term': 'font-family',
        'translation': 'tipo de letra',
        'description': 'definir la familia tipográfica',
        'aliases': ['fontFamily'],
        'example': {
            'title': 'Stack moderno',
            'code': 'body {\n  font-family: "Inter", system-ui, -apple-system, sans-serif;\n}',
        },
    },
    {
        'term': 'font-size',
        'translation': 'tamaño del texto',
        'description': 'controlar la altura del texto',
        'aliases': ['fontSize'],
        'example': {
            'title': 'Escala tipográfica',
            'code': 'h1 {\n  font-size: clamp(2rem, 4vw, 3rem);\n}',
        },
    },
    {
        'term': 'font-weight',
        'translation': 'grosor del texto',
        'description': 'seleccionar el peso tipográfico (400, 600, bold)',
        'aliases': ['fontWeight'],
        'example': {
            'title': 'Titular bold',
            'code': 'h2 {\n  font-weight: 600;\n}',
        },
    },
    {
        'term': 'form-control',
        'translation': 'control de formulario',
        'description': 'conjunto de estilos aplicados a inputs, selects y textareas',
        'example': {
            'title': 'Input estilizado',
            'code': '.form-control {\n  width: 100%;\n  padding: 0.75rem 1rem;\n  border: 1px solid #334155;\n  border-radius: 0.75rem;\n}',
        },
        'what': 'Lo usamos para estandarizar la apariencia de los campos de formulario.',
        'how': 'Crea una clase .form-control que puedas reutilizar en todos los elementos interactivos.',
    },
    {
        'term': 'gap',
        'translation': 'espacio entre elementos',
        'description': 'definir el espacio entre filas y columnas en flex o grid',
        'example': {
            'title': 'Stack aireado',
            'code': '.stack {\n  display: flex;\n  flex-direction: column;\n  gap: 1.25rem;\n}',
        },
    },
    {
        'term': 'grid',
        'translation': 'sistema de cuadrícula',
        'description': 'activar el layout basado en filas y columnas',
        'example': {
            'title': 'Layout de tablero',
            'code': '.dashboard {\n  display: grid;\n  grid-template-columns: repeat(3, minmax(0, 1fr));\n  gap: 1rem;\n}',
        },
    },
    {
        'term': 'grid-template-columns',
        'translation': 'definición de columnas del grid',
        'description': 'establecer cuántas columnas y sus tamaños',
        'aliases': ['gridTemplateColumns'],
        'example': {
            'title': 'Tres columnas fluidas',
            'code': '.gallery {\n  display: grid;\n  grid-template-columns: repeat(auto-fit, minmax(180px, 1fr));\n}',
        },
    },
    {
        'term': 'grid-template-rows',
        'translation': 'definición de filas del grid',
        'description': 'controlar la altura de cada fila',
        'aliases': ['gridTemplateRows'],
        'example': {
            'title': 'Filas fijas',
            'code': '.schedule {\n  display: grid;\n  grid-template-rows: 64px auto 64px;\n}',
        },
    },
    {
        'term': 'grid-gap',
        'translation': 'separación entre celdas',
        'description': 'espacio entre filas y columnas del grid (equivalente a gap)',
        'aliases': ['gridGap'],
        'example': {
            'title': 'Compatibilidad antigua',
            'code': '.legacy-grid {\n  display: grid;\n  grid-gap: 1.5rem;\n}',
            'note': 'Usa gap en especificaciones modernas.',
        },
    },
    {
        'term': 'height',
        'translation': 'alto del elemento',
        'description': 'definir la altura explícita',
        'example': {
            'title': 'Hero alto',
            'code': '.hero {\n  height: 70vh;\n}',
        },
    },
    {
        'term': 'hover',
        'translation': 'estado al pasar el cursor',
        'description': 'pseudo-clase que responde al cursor encima',
        'aliases': [':hover'],
        'example': {
            'title': 'Botón reactivo',
            'code': '.button:hover {\n  transform: translateY(-2px);\n}',
        },
        'what': 'Lo usamos para dar feedback visual inmediato a elementos interactivos.',
    },
    {
        'term': 'inherit',
        'translation': 'heredar valores del padre',
        'description': 'forzar que una propiedad tome el mismo valor que su elemento contenedor',
        'example': {
            'title': 'Colores consistentes',
            'code': '.link {\n  color: inherit;\n}',
        },
        'how': 'Establece inherit cuando quieras que propiedades como color, font o visibility sigan al ancestro.',
    },
    {
        'term': 'inline',
        'translation': 'elemento en línea',
        'description': 'hacer que el elemento no rompa la línea y respete el flujo del texto',
        'example': {
            'title': 'Etiqueta inline',
            'code': '.tag {\n  display: inline;\n}',
        },
    },
    {
        'term': 'isolation',
        'translation': 'controla el stacking context',
        'description': 'forzar que un elemento cree un nuevo contexto de apilamiento',
        'example': {
            'title': 'Popup aislado',
            'code': '.modal {\n  isolation: isolate;\n}',
            'note': 'Evita que z-index externos interfieran.',
        },
    },
    {
        'term': 'justify-content',
        'translation': 'alinear elementos horizontalmente en flex/grid',
        'description': 'distribuir los ítems a lo largo del eje principal',
        'aliases': ['justifyContent'],
        'example': {
            'title': 'Espaciado uniforme',
            'code': '.toolbar {\n  display: flex;\n  justify-content: space-between;\n}',
        },
    },
    {
        'term': 'justify-items',
        'translation': 'alinear ítems dentro de una celda de grid',
        'description': 'controlar la alineación horizontal de cada celda del grid',
        'aliases': ['justifyItems'],
        'example': {
            'title': 'Cards centradas',
            'code': '.pricing {\n  display: grid;\n  justify-items: center;\n}',
        },
    },
    {
        'term': 'justify-self',
        'translation': 'alinear un solo ítem dentro de su celda',
        'description': 'sobrescribir el alineado horizontal de un elemento en grid',
        'aliases': ['justifySelf'],
        'example': {
            'title': 'Botón alineado a la derecha',
            'code': '.card button {\n  justify-self: end;\n}',
        },
    },
    {
        'term': 'keyframes',
        'translation': 'bloques que definen animaciones paso a paso',
        'description': 'describir los estados intermedios de una animación CSS',
        'aliases': ['@keyframes'],
        'example': {
            'title': 'Brillo infinito',
            'code': '@keyframes pulse {\n  0% { opacity: 0.4; }\n  50% { opacity: 1; }\n  100% { opacity: 0.4; }\n}',
        },
        'how': 'Define @keyframes nombre { 0% {...} 100% {...} } y referencia el nombre desde animation.',
    },
    {
        'term': 'left',
        'translation': 'posición horizontal izquierda',
        'description': 'mover un elemento posicionado respecto al borde izquierdo',
        'example': {
            'title': 'Tooltip alineado',
            'code': '.tooltip {\n  position: absolute;\n  left: 0;\n}',
        },
    },
    {
        'term': 'letter-spacing',
        'translation': 'espacio entre letras',
        'description': 'ajustar la separación horizontal entre caracteres',
        'aliases': ['letterSpacing'],
        'example': {
            'title': 'Título amplio',
            'code': '.eyebrow {\n  letter-spacing: 0.12em;\n  text-transform: uppercase;\n}',
        },
    },
    {
        'term': 'line-height',
        'translation': 'altura de línea',
        'description': 'definir la distancia vertical entre líneas de texto',
        'aliases': ['lineHeight'],
        'example': {
            'title': 'Lectura cómoda',
            'code': 'p {\n  line-height: 1.7;\n}',
        },
    },
    {
        'term': 'list-style',
        'translation': 'estilo de listas',
        'description': 'controlar el tipo de viñeta, posición e imagen de listas',
        'aliases': ['listStyle'],
        'example': {
            'title': 'Lista custom',
            'code': 'ul.features {\n  list-style: square inside;\n}',
        },
    },
    {
        'term': 'margin',
        'translation': 'margen externo',
        'description': 'espacio exterior que separa un elemento de otros',
        'example': {
            'title': 'Sección respirable',
            'code': '.section {\n  margin: 3rem auto;\n}',
        },
    },
    {
        'term': 'margin-top',
        'translation': 'margen arriba',
        'description': 'separación exterior en la parte superior',
        'aliases': ['marginTop'],
        'example': {
            'title': 'Offset superior',
            'code': '.section + .section {\n  margin-top: 4rem;\n}',
        },
    },
    {
        'term': 'margin-bottom',
        'translation': 'margen abajo',
        'description': 'espacio exterior inferior',
        'aliases': ['marginBottom'],
        'example': {
            'title': 'Separar cards',
            'code': '.card {\n  margin-bottom: 1.5rem;\n}',
        },
    },
    {
        'term': 'margin-left',
        'translation': 'margen izquierda',
        'description': 'espacio exterior en el lado izquierdo',
        'aliases': ['marginLeft'],
        'example': {
            'title': 'Empujar al centro',
            'code': '.cta {\n  margin-left: auto;\n}',
        },
    },
    {
        'term': 'margin-right',
        'translation': 'margen derecha',
        'description': 'espacio exterior en el lado derecho',
        'aliases': ['marginRight'],
        'example': {
            'title': 'Separar icono',
            'code': '.button svg {\n  margin-right: 0.5rem;\n}',
        },
    },
    {
        'term': 'max-height',
        'translation': 'altura máxima',
        'description': 'límite superior para la altura',
        'aliases': ['maxHeight'],
        'example': {
            'title': 'Contenedor recortado',
            'code': '.preview {\n  max-height: 320px;\n  overflow: auto;\n}',
        },
    },
    {
        'term': 'max-width',
        'translation': 'anchura máxima',
        'description': 'límite superior para el ancho',
        'aliases': ['maxWidth'],
        'example': {
            'title': 'Texto legible',
            'code': '.article {\n  max-width: 720px;\n}',
        },
    },
    {
        'term': 'min-height',
        'translation': 'altura mínima',
        'description': 'altura mínima que debe ocupar un elemento',
        'aliases': ['minHeight'],
        'example': {
            'title': 'Viewport completo',
            'code': '.hero {\n  min-height: 100vh;\n}',
        },
    },
    {
        'term': 'min-width',
        'translation': 'anchura mínima',
        'description': 'ancho mínimo aceptado',
        'aliases': ['minWidth'],
        'example': {
            'title': 'Botón ancho',
            'code': '.button {\n  min-width: 160px;\n}',
        },
    },
    {
        'term': 'object-fit',
        'translation': 'cómo se ajusta una imagen dentro de un contenedor',
        'description': 'controlar el recorte y escalado de contenido reemplazado como imágenes o videos',
        'aliases': ['objectFit'],
        'example': {
            'title': 'Portada centrada',
            'code': '.card img {\n  width: 100%;\n  height: 240px;\n  object-fit: cover;\n}',
        },
    },
    {
        'term': 'opacity',
        'translation': 'transparencia',
        'description': 'regular la opacidad visual de 0 a 1',
        'aliases': ['opacity value'],
        'example': {
            'title': 'Estado deshabilitado',
            'code': '.button[disabled] {\n  opacity: 0.4;\n}',
        },
    },
    {
        'term': 'outline',
        'translation': 'borde externo adicional',
        'description': 'dibujar un trazo alrededor del borde sin afectar el layout',
        'example': {
            'title': 'Focus accesible',
            'code': '.card:focus-visible {\n  outline: 2px solid #22d3ee;\n  outline-offset: 4px;\n}',
            'note': 'Ideal para estados de enfoque accesibles.',
        },
    },
    {
        'term': 'overflow',
        'translation': 'qué hacer si el contenido sobrepasa',
        'description': 'definir si el contenido extra se oculta, muestra scroll o se desborda',
        'example': {
            'title': 'Recorte controlado',
            'code': '.thumbnail {\n  overflow: hidden;\n}',
        },
    },
    {
        'term': 'overflow-x',
        'translation': 'desbordamiento horizontal',
        'description': 'manejar el overflow en el eje X',
        'aliases': ['overflowX'],
        'example': {
            'title': 'Scroll horizontal',
            'code': '.chips {\n  display: flex;\n  overflow-x: auto;\n  gap: 1rem;\n}',
        },
    },
    {
        'term': 'overflow-y',
        'translation': 'desbordamiento vertical',
        'description': 'manejar el overflow en el eje Y',
        'aliases': ['overflowY'],
        'example': {
            'title': 'Panel con scroll',
            'code': '.log {\n  max-height: 240px;\n  overflow-y: scroll;\n}',
        },
    },
    {
        'term': 'padding',
        'translation': 'espacio interno',
        'description': 'separación interna entre el contenido y el borde',
        'example': {
            'title': 'Card acolchada',
            'code': '.card {\n  padding: 2rem;\n}',
        },
    },
    {
        'term': 'padding-left',
        'translation': 'padding izquierdo',
        'description': 'espacio interno en el lado izquierdo',
        'aliases': ['paddingLeft'],
        'example': {
            'title': 'Texto alineado',
            'code': '.list-item {\n  padding-left: 1.5rem;\n}',
        },
    },
    {
        'term': 'padding-right',
        'translation': 'padding derecho',
        'description': 'espacio interno en el lado derecho',
        'aliases': ['paddingRight'],
        'example': {
            'title': 'Acción separada',
            'code': '.button {\n  padding-right: 2.5rem;\n}',
        },
    },
    {
        'term': 'padding-top',
        'translation': 'padding arriba',
        'description': 'espacio interno superior',
        'aliases': ['paddingTop'],
        'example': {
            'title': 'Hero equilibrado',
            'code': '.hero {\n  padding-top: 6rem;\n}',
        },
    },
    {
        'term': 'padding-bottom',
        'translation': 'padding abajo',
        'description': 'espacio interno inferior',
        'aliases': ['paddingBottom'],
        'example': {
            'title': 'Footer aireado',
            'code': '.footer {\n  padding-bottom: 4rem;\n}',
        },
    },
    {
        'term': 'position',
        'translation': 'modelo de posicionamiento',
        'description': 'definir si un elemento es static, relative, absolute, fixed o sticky',
        'example': {
            'title': 'Header sticky',
            'code': 'header {\n  position: sticky;\n  top: 0;\n}',
        },
    },
    {
        'term': 'pseudo-class',
        'translation': 'estado especial',
        'description': 'selector que representa un estado dinámico como :hover, :focus o :checked',
        'aliases': ['pseudo class'],
        'example': {
            'title': 'Focus visible',
            'code': '.input:focus-visible {\n  border-color: #38bdf8;\n}',
            'note': 'Activa estilos cuando el elemento cumple una condición.',
        },
        'what': 'Lo empleamos para responder a interacciones o estados semánticos sin JavaScript.',
    },
    {
        'term': 'pseudo-element',
        'translation': 'elemento falso',
        'description': 'selector que crea un nodo virtual como ::before o ::after',
        'aliases': ['pseudo element'],
        'example': {
            'title': 'Decorador antes',
            'code': '.title::before {\n  content: "";\n  width: 48px;\n  height: 4px;\n  background: currentColor;\n}',
        },
    },
    {
        'term': 'relative',
        'translation': 'posición relativa',
        'description': 'activar un nuevo contexto sin salir del flujo',
        'example': {
            'title': 'Wrapper relativo',
            'code': '.card {\n  position: relative;\n}',
        },
    },
    {
        'term': 'absolute',
        'translation': 'posición absoluta',
        'description': 'sacar el elemento del flujo y posicionarlo respecto a su contenedor posicionado',
        'example': {
            'title': 'Badge posicionado',
            'code': '.badge {\n  position: absolute;\n  top: 0.5rem;\n  right: 0.5rem;\n}',
        },
    },
    {
        'term': 'right',
        'translation': 'alineación derecha',
        'description': 'mover un elemento posicionado respecto al borde derecho',
        'example': {
            'title': 'Tooltip derecho',
            'code': '.tooltip {\n  right: -1rem;\n}',
        },
    },
    {
        'term': 'rotate',
        'translation': 'rotar elementos',
        'description': 'girar un elemento usando transform',
        'example': {
            'title': 'Etiqueta inclinada',
            'code': '.label {\n  transform: rotate(-5deg);\n}',
        },
    },
    {
        'term': 'row',
        'translation': 'fila',
        'description': 'disponer elementos en sentido horizontal',
        'example': {
            'title': 'Row en flex',
            'code': '.toolbar {\n  display: flex;\n  flex-direction: row;\n}',
        },
        'what': 'Lo usamos para colocar información de izquierda a derecha en layouts.',
    },
    {
        'term': 'scale',
        'translation': 'escalar el tamaño',
        'description': 'aumentar o disminuir el tamaño mediante transform',
        'example': {
            'title': 'Hover ampliado',
            'code': '.card:hover {\n  transform: scale(1.02);\n}',
        },
    },
    {
        'term': 'scroll-behavior',
        'translation': 'comportamiento del scroll',
        'description': 'definir si el desplazamiento es instantáneo o suave',
        'aliases': ['scrollBehavior'],
        'example': {
            'title': 'Scroll suave',
            'code': 'html {\n  scroll-behavior: smooth;\n}',
        },
    },
    {
        'term': 'shadow',
        'translation': 'sombra',
        'description': 'representar zonas sombreadas para dar profundidad',
        'example': {
            'title': 'Drop shadow',
            'code': '.avatar {\n  filter: drop-shadow(0 10px 25px rgba(15, 23, 42, 0.35));\n}',
        },
    },
    {
        'term': 'size',
        'translation': 'tamaño',
        'description': 'definir el tamaño total de un recurso o página',
        'example': {
            'title': 'Página A4',
            'code': '@page {\n  size: A4 portrait;\n}',
            'note': 'Común en estilos para impresión.',
        },
        'how': 'Define size dentro de @page o componentes que necesitan declarar el formato completo.',
    },
    {
        'term': 'sticky',
        'translation': 'pegajoso al hacer scroll',
        'description': 'comportar un elemento como relativo hasta que alcanza un offset y se fija',
        'example': {
            'title': 'Columna sticky',
            'code': '.summary {\n  position: sticky;\n  top: 2rem;\n}',
        },
    },
    {
        'term': 'stroke',
        'translation': 'borde en SVG',
        'description': 'definir color y grosor de trazos SVG',
        'example': {
            'title': 'Gráfico vectorial',
            'code': 'path {\n  fill: none;\n  stroke: #0ea5e9;\n  stroke-width: 2;\n}',
        },
    },
    {
        'term': 'style',
        'translation': 'estilos en línea',
        'description': 'atributo HTML que permite declarar CSS directamente',
        'example': {
            'title': 'Override puntual',
            'code': '<button style="background:#0f172a;color:white;">\n  Guardar\n</button>',
            'note': 'Úsalo solo para ajustes puntuales o generados dinámicamente.',
        },
        'how': 'Prefiere clases reutilizables y deja los estilos en línea para casos generados en runtime.',
    },
    {
        'term': 'text-align',
        'translation': 'alineación del texto',
        'description': 'alinear contenido inline respecto al contenedor',
        'aliases': ['textAlign'],
        'example': {
            'title': 'Texto centrado',
            'code': '.empty-state {\n  text-align: center;\n}',
        },
    },
    {
        'term': 'text-decoration',
        'translation': 'decoraciones del texto',
        'description': 'aplicar subrayado, tachado o estilos personalizados',
        'aliases': ['textDecoration'],
        'example': {
            'title': 'Links discretos',
            'code': 'a {\n  text-decoration: underline;\n  text-decoration-color: rgba(255,255,255,0.4);\n}',
        },
    },
    {
        'term': 'text-transform',
        'translation': 'mayúsculas o minúsculas',
        'description': 'convertir el texto a uppercase, lowercase o capitalize',
        'aliases': ['textTransform'],
        'example': {
            'title': 'Etiqueta uppercase',
            'code': '.tag {\n  text-transform: uppercase;\n}',
        },
    },
    {
        'term': 'transform',
        'translation': 'transformaciones',
        'description': 'aplicar rotaciones, traslaciones, escalados o sesgos',
        'example': {
            'title': 'Tarjeta animada',
            'code': '.card:hover {\n  transform: translateY(-6px) scale(1.01);\n}',
        },
    },
    {
        'term': 'transition',
        'translation': 'animación suave entre cambios',
        'description': 'definir la duración y curva de cambio para propiedades',
        'example': {
            'title': 'Transición global',
            'code': '.interactive {\n  transition: all 200ms ease-out;\n}',
        },
    },
    {
        'term': 'translate',
        'translation': 'mover el elemento en X/Y',
        'description': 'desplazar elementos usando transform translate',
        'example': {
            'title': 'Botón deslizante',
            'code': '.button:active {\n  transform: translateY(1px);\n}',
        },
    },
    {
        'term': 'unit',
        'translation': 'unidad',
        'description': 'medidas como px, %, rem, em, vh, vw',
        'example': {
            'title': 'Unidades combinadas',
            'code': '.hero {\n  padding: 8vh 5vw;\n  font-size: clamp(1rem, 1.2vw, 1.5rem);\n}',
        },
        'how': 'Selecciona la unidad según el contexto: px para precisión, rem para accesibilidad y porcentajes para layouts fluidos.',
    },
    {
        'term': 'user-select',
        'translation': 'permitir o impedir seleccionar texto',
        'description': 'controlar si el usuario puede seleccionar el contenido',
        'aliases': ['userSelect'],
        'example': {
            'title': 'Evitar selección',
            'code': '.button {\n  user-select: none;\n}',
        },
    },
    {
        'term': 'variable (custom property)',
        'translation': 'valor CSS definido con --nombre',
        'description': 'definir valores reutilizables mediante propiedades personalizadas',
        'aliases': ['custom property', 'CSS variable', 'var()'],
        'example': {
            'title': 'Paleta global',
            'code': ':root {\n  --brand: #0ea5e9;\n}\nbutton {\n  background: var(--brand);\n}',
        },
        'how': 'Declara --nombre en un scope (idealmente :root) y consúmelo con var(--nombre).',
    },
    {
        'term': 'vertical-align',
        'translation': 'alineación vertical en inline o tabla',
        'description': 'alinear elementos en línea o celdas de tabla respecto a la línea base',
        'aliases': ['verticalAlign'],
        'example': {
            'title': 'Icono alineado',
            'code': '.icon {\n  vertical-align: middle;\n}',
        },
    },
    {
        'term': 'visibility',
        'translation': 'visible u oculto',
        'description': 'mostrar u ocultar un elemento manteniendo su espacio',
        'example': {
            'title': 'Ocultar sin colapsar',
            'code': '.banner[aria-hidden="true"] {\n  visibility: hidden;\n}',
        },
    },
    {
        'term': 'vw',
        'translation': 'porcentaje del ancho de la ventana',
        'description': 'unidad relativa al ancho del viewport',
        'example': {
            'title': 'Tipografía fluida',
            'code': 'h1 {\n  font-size: clamp(2.5rem, 7vw, 4rem);\n}',
        },
    },
    {
        'term': 'vh',
        'translation': 'porcentaje del alto de la ventana',
        'description': 'unidad relativa al alto del viewport',
        'example': {
            'title': 'Sección pantalla completa',
            'code': '.section {\n  min-height: 100vh;\n}',
        },
    },
    {
        'term': 'z-index',
        'translation': 'orden de apilamiento',
        'description': 'controlar qué elemento se muestra encima cuando hay solapamientos',
        'aliases': ['zIndex'],
        'example': {
            'title': 'Modal en frente',
            'code': '.modal {\n  position: fixed;\n  z-index: 50;\n}',
        },
    },
    {
        'term': 'zoom',
        'translation': 'escalar la vista',
        'description': 'ajustar el zoom de un elemento (soporte limitado)',
        'example': {
            'title': 'Compatibilidad heredada',
            'code': '.legacy {\n  zoom: 1;\n}',
            'note': 'Úsalo solo para hacks en navegadores antiguos.',
        },
        'how': 'Evita zoom salvo que necesites compatibilidad con motores antiguos; prefiere transform: scale.',
    },
]


def css_entry_to_raw(entry: dict) -> dict:
    """Convert a reduced CSS entry into a full raw-term mapping."""
    example = entry['example']
    return {
        'term': entry['term'],
        'translation': entry['translation'],
        'category': 'frontend',
        'description_es': entry['description'],
        'aliases': list(entry.get('aliases') or []),
        'tags': ['css'],
        'example': {
            'title_es': example['title'],
            'title_en': example['title'],
            'code': example['code'],
            'note_es': example.get('note'),
        },
        'what_es': entry.get('what'),
        'how_es': entry.get('how'),
        'language_override': 'css',
    }
